"""
Logging configuration for the tdnf client utilities.

The package logs through loguru. Output is disabled until the host
application calls ``setup_logging``.
"""
from __future__ import annotations

from pathlib import Path

from loguru import logger

from tdnfclient.constants import get_default_paths


LOG_FILE_NAME = 'tdnfclient.log'

# Library mode: silent unless the application opts in
logger.disable('tdnfclient')


def setup_logging(log_dir: Path | None = None, level: str = 'DEBUG') -> int:
    """Enable package logging and add a rotating file sink.

    Args:
        log_dir: Directory for log files. Defaults to ./logs
        level: Minimum level written to the file

    Returns:
        Id of the added file sink, for ``logger.remove``
    """
    if log_dir is None:
        log_dir = get_default_paths()['log_dir']

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILE_NAME

    sink_id = logger.add(
        log_path,
        rotation='5 MB',
        retention='30 days',
        compression='gz',
        format='{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}',
        level=level,
        filter='tdnfclient',
    )
    logger.enable('tdnfclient')
    return sink_id
