"""
Error codes and exceptions for the tdnf client utilities.

System errno values share one numeric space with application codes:
a raw errno is stored as ``SYSTEM_BASE + errno``. The helpers here are
the only place that encodes or decodes that offset.
"""
from __future__ import annotations

import errno as _errno
from typing import TYPE_CHECKING, Optional, Union

from tdnfclient.constants import (
    ERROR_TDNF_INVALID_PARAMETER,
    ERROR_TDNF_OUT_OF_MEMORY,
    SYSTEM_BASE,
)

if TYPE_CHECKING:
    import os

    from tdnfclient.models import ErrorCode


def is_system_error(code: int) -> bool:
    """Return True if ``code`` lies in the system error range.

    Examples:
        >>> is_system_error(SYSTEM_BASE)
        False
        >>> is_system_error(SYSTEM_BASE + 1)
        True
    """
    return code > SYSTEM_BASE


def get_system_error(code: int) -> int:
    """Decode the raw errno from a system range code, or 0 if not one."""
    if is_system_error(code):
        return code - SYSTEM_BASE
    return 0


def encode_system_error(errno: int) -> int:
    """Re-encode a raw errno into the unified code space."""
    return errno + SYSTEM_BASE


class TDNFError(Exception):
    """Base class for all tdnf client errors.

    Attributes:
        code: Flat numeric error code
        message: Short description of what failed
    """

    def __init__(self, code: int, message: str = '') -> None:
        self.code = code
        self.message = message
        super().__init__(message or f'tdnf error {code}')

    @property
    def error_code(self) -> 'ErrorCode':
        """Tagged form of ``code``."""
        from tdnfclient.models import ErrorCode
        return ErrorCode.from_value(self.code)


class InvalidParameterError(TDNFError):
    """A required input was missing, empty or of the wrong kind."""

    def __init__(self, message: str = 'Invalid argument') -> None:
        super().__init__(ERROR_TDNF_INVALID_PARAMETER, message)


class OutOfMemoryError(TDNFError):
    """Allocating or formatting a result failed."""

    def __init__(self, message: str = 'Out of memory') -> None:
        super().__init__(ERROR_TDNF_OUT_OF_MEMORY, message)


class TDNFSystemError(TDNFError):
    """Wraps an operating-system error.

    Attributes:
        errno: Raw platform error number
        path: Filesystem path involved, if any
    """

    def __init__(
        self,
        errno: int,
        path: Optional[Union[str, 'os.PathLike[str]']] = None,
        message: str = '',
    ) -> None:
        self.errno = errno
        self.path = path
        if not message:
            message = f'[Errno {errno}] {_errno.errorcode.get(errno, "unknown")}'
            if path is not None:
                message = f'{message}: {path}'
        super().__init__(encode_system_error(errno), message)

    @staticmethod
    def from_oserror(
        exc: OSError,
        path: Optional[Union[str, 'os.PathLike[str]']] = None,
    ) -> 'TDNFSystemError':
        """Build from a caught OSError, keeping its errno.

        OSError captures errno at the failing call, so nothing issued
        afterwards can overwrite it.
        """
        if path is None:
            path = exc.filename
        code = exc.errno if exc.errno is not None else _errno.EIO
        return TDNFSystemError(code, path)


class AlreadyExistsError(TDNFSystemError):
    """The complete target path of a tree creation already exists."""

    def __init__(
        self,
        path: Optional[Union[str, 'os.PathLike[str]']] = None,
        message: str = '',
    ) -> None:
        super().__init__(_errno.EEXIST, path, message)
