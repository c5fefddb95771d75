"""
Directory creation and classification for the tdnf client.

``make_dir`` creates one directory and is a no-op when it exists.
``make_dirs`` creates every missing component of a path, like
``mkdir -p``, but refuses a target that already exists.
"""
from __future__ import annotations

import os
import stat
from typing import Union

from tdnfclient.constants import DIR_MODE
from tdnfclient.errors import AlreadyExistsError, InvalidParameterError, TDNFSystemError
from tdnfclient.logging import logger


PathLike = Union[str, 'os.PathLike[str]']

SEP = '/'


def _require_path(path: PathLike) -> str:
    try:
        path_str = os.fspath(path)
    except TypeError as e:
        raise InvalidParameterError(f"Path is required, got {path!r}") from e
    if not isinstance(path_str, str) or not path_str:
        raise InvalidParameterError(f"Path must be a non-empty string, got {path!r}")
    return path_str


def _exists(path: str) -> bool:
    """Return whether ``path`` exists, raising for anything but ENOENT."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise TDNFSystemError.from_oserror(e, path) from e
    return True


def make_dir(path: PathLike) -> None:
    """Create a single directory if it does not already exist.

    Args:
        path: Directory to create. Its parent must exist

    Raises:
        InvalidParameterError: If path is empty
        TDNFSystemError: If the path cannot be checked or created
    """
    path_str = _require_path(path)

    if _exists(path_str):
        return

    try:
        os.mkdir(path_str, DIR_MODE)
    except FileExistsError:
        # Created concurrently between the check and mkdir
        return
    except OSError as e:
        raise TDNFSystemError.from_oserror(e, path_str) from e
    logger.debug(f"Created directory {path_str}")


def make_dirs(path: PathLike) -> None:
    """Create a directory and all missing parents, root to leaf.

    Unlike make_dir, an existing target is an error.

    Args:
        path: Directory path to create

    Raises:
        InvalidParameterError: If path is empty
        AlreadyExistsError: If the full path already exists
        TDNFSystemError: If any component cannot be checked or created
    """
    path_str = _require_path(path)

    if _exists(path_str):
        raise AlreadyExistsError(path_str)

    work = path_str
    if work.endswith(SEP):
        work = work[:-1]

    for i in range(1, len(work)):
        if work[i] == SEP:
            make_dir(work[:i])
    make_dir(work)


def is_dir(path: PathLike) -> bool:
    """Check whether an existing path is a directory.

    Args:
        path: Path to classify

    Returns:
        True for a directory (symlinks are followed), False otherwise

    Raises:
        InvalidParameterError: If path is empty
        TDNFSystemError: If the path cannot be stat-ed (e.g. ENOENT)
    """
    path_str = _require_path(path)
    try:
        st = os.stat(path_str)
    except OSError as e:
        raise TDNFSystemError.from_oserror(e, path_str) from e
    return stat.S_ISDIR(st.st_mode)
