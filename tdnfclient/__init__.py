"""
tdnf client utilities

Support layer for the tdnf package-management client: error
descriptions, size formatting, glob detection and directory creation.
"""
from __future__ import annotations

__version__ = "0.1.0"

# Re-export main components for convenient imports
from tdnfclient.errors import (
    TDNFError,
    InvalidParameterError,
    OutOfMemoryError,
    TDNFSystemError,
    AlreadyExistsError,
    is_system_error,
    get_system_error,
    encode_system_error,
)
from tdnfclient.models import (
    ErrorCode,
    ApplicationErrorCode,
    SystemErrorCode,
    ErrorDescription,
)
from tdnfclient.error_strings import (
    ErrorTable,
    get_default_table,
    get_error_string,
    load_error_table,
)
from tdnfclient.utils import format_size, is_glob
from tdnfclient.fs import make_dir, make_dirs, is_dir
from tdnfclient.logging import setup_logging

__all__ = [
    "__version__",
    # Errors
    "TDNFError",
    "InvalidParameterError",
    "OutOfMemoryError",
    "TDNFSystemError",
    "AlreadyExistsError",
    "is_system_error",
    "get_system_error",
    "encode_system_error",
    # Models
    "ErrorCode",
    "ApplicationErrorCode",
    "SystemErrorCode",
    "ErrorDescription",
    # Error strings
    "ErrorTable",
    "get_default_table",
    "get_error_string",
    "load_error_table",
    # Utils
    "format_size",
    "is_glob",
    # Filesystem
    "make_dir",
    "make_dirs",
    "is_dir",
    # Logging
    "setup_logging",
]
