"""
Constants and configuration for the tdnf client utilities.

Defines the error code space, the built-in error description table,
size units, glob characters and path configuration.
"""
from __future__ import annotations

import errno
from pathlib import Path
from typing import Dict, FrozenSet, Tuple


# --- Error Code Space --------------------------------------------------------

ERROR_TDNF_SUCCESS = 0

# Application-defined codes live in (0, SYSTEM_BASE]
ERROR_TDNF_BASE = 1000
ERROR_TDNF_PACKAGE_REQUIRED = ERROR_TDNF_BASE + 1
ERROR_TDNF_CONF_FILE_LOAD = ERROR_TDNF_BASE + 2
ERROR_TDNF_REPO_FILE_LOAD = ERROR_TDNF_BASE + 3
ERROR_TDNF_INVALID_REPO_FILE = ERROR_TDNF_BASE + 4
ERROR_TDNF_REPO_DIR_OPEN = ERROR_TDNF_BASE + 5
ERROR_TDNF_NO_ENABLED_REPOS = ERROR_TDNF_BASE + 6
ERROR_TDNF_PACKAGELIST_EMPTY = ERROR_TDNF_BASE + 7
ERROR_TDNF_GOAL_CREATE = ERROR_TDNF_BASE + 8
ERROR_TDNF_CLEAN_UNSUPPORTED = ERROR_TDNF_BASE + 9

# System errno values are re-encoded as SYSTEM_BASE + errno
SYSTEM_BASE = 1500

ERROR_TDNF_INVALID_PARAMETER = SYSTEM_BASE + errno.EINVAL
ERROR_TDNF_OUT_OF_MEMORY = SYSTEM_BASE + errno.ENOMEM
ERROR_TDNF_NO_DATA = SYSTEM_BASE + errno.ENODATA
ERROR_TDNF_FILE_NOT_FOUND = SYSTEM_BASE + errno.ENOENT
ERROR_TDNF_ACCESS_DENIED = SYSTEM_BASE + errno.EACCES
ERROR_TDNF_ALREADY_EXISTS = SYSTEM_BASE + errno.EEXIST
ERROR_TDNF_INVALID_ADDRESS = SYSTEM_BASE + errno.EFAULT
ERROR_TDNF_CALL_INTERRUPTED = SYSTEM_BASE + errno.EINTR
ERROR_TDNF_FILESYS_IO = SYSTEM_BASE + errno.EIO


# --- Error Descriptions ------------------------------------------------------

UNKNOWN_ERROR_STRING = 'Unknown error'

# (code, symbolic name, description); first match wins on lookup
TDNF_ERROR_TABLE: Tuple[Tuple[int, str, str], ...] = (
    (ERROR_TDNF_BASE, 'ERROR_TDNF_EBASE', 'Generic base error'),
    (ERROR_TDNF_PACKAGE_REQUIRED, 'ERROR_TDNF_PACKAGE_REQUIRED',
     'Package name expected but was not provided'),
    (ERROR_TDNF_CONF_FILE_LOAD, 'ERROR_TDNF_CONF_FILE_LOAD',
     'Error loading tdnf conf (/etc/tdnf/tdnf.conf)'),
    (ERROR_TDNF_REPO_FILE_LOAD, 'ERROR_TDNF_REPO_FILE_LOAD',
     'Error loading tdnf repo (normally under /etc/yum.repos.d/)'),
    (ERROR_TDNF_INVALID_REPO_FILE, 'ERROR_TDNF_INVALID_REPO_FILE',
     'Encountered an invalid repo file'),
    (ERROR_TDNF_REPO_DIR_OPEN, 'ERROR_TDNF_REPO_DIR_OPEN',
     'Error opening repo dir. Check if the repodir configured in tdnf.conf '
     'exists (usually /etc/yum.repos.d)'),
    (ERROR_TDNF_NO_ENABLED_REPOS, 'ERROR_TDNF_NO_ENABLED_REPOS',
     'There are no enabled repos.'),
    (ERROR_TDNF_PACKAGELIST_EMPTY, 'ERROR_TDNF_PACKAGELIST_EMPTY',
     'Packagelist was empty'),
    (ERROR_TDNF_GOAL_CREATE, 'ERROR_TDNF_GOAL_CREATE', 'Error creating goal'),
    (ERROR_TDNF_CLEAN_UNSUPPORTED, 'ERROR_TDNF_CLEAN_UNSUPPORTED',
     'Clean type specified is not supported in this release. '
     'Please try clean all.'),
    (ERROR_TDNF_INVALID_PARAMETER, 'ERROR_TDNF_INVALID_PARAMETER',
     'Invalid argument'),
    (ERROR_TDNF_OUT_OF_MEMORY, 'ERROR_TDNF_OUT_OF_MEMORY', 'Out of memory'),
    (ERROR_TDNF_NO_DATA, 'ERROR_TDNF_NO_DATA', 'No data available'),
    (ERROR_TDNF_FILE_NOT_FOUND, 'ERROR_TDNF_FILE_NOT_FOUND', 'File not found'),
    (ERROR_TDNF_ACCESS_DENIED, 'ERROR_TDNF_ACCESS_DENIED', 'Access denied'),
    (ERROR_TDNF_ALREADY_EXISTS, 'ERROR_TDNF_ALREADY_EXISTS', 'Already exists'),
)


# --- Formatting --------------------------------------------------------------

# Byte, kilo, mega, giga; scaling never goes past the last entry
SIZE_UNITS: Tuple[str, ...] = ('b', 'k', 'M', 'G')
SIZE_STEP = 1024

GLOB_CHARS: FrozenSet[str] = frozenset('*?[')


# --- Filesystem --------------------------------------------------------------

# rwxr-xr-x, before the process umask is applied
DIR_MODE = 0o755


def get_default_paths() -> Dict[str, Path]:
    """Get default paths relative to current working directory.

    Returns:
        Dictionary with 'log_dir'
    """
    base = Path('.')
    return {
        'log_dir': base / 'logs',
    }
