"""
Data models for the tdnf client utilities.

This module contains the tagged error code types and the entries
of the error description table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

from tdnfclient.constants import SYSTEM_BASE
from tdnfclient.errors import (
    InvalidParameterError,
    encode_system_error,
    get_system_error,
    is_system_error,
)


@dataclass(frozen=True)
class ErrorCode:
    """Base class for tagged error codes.

    A flat numeric code is classified with ``ErrorCode.from_value``;
    ``value`` converts back to the flat form.
    """

    @property
    def value(self) -> int:
        raise NotImplementedError

    @property
    def is_system(self) -> bool:
        return False

    @staticmethod
    def from_value(code: int) -> 'ErrorCode':
        """Classify a flat numeric code.

        Args:
            code: Code in the unified error code space

        Returns:
            SystemErrorCode for codes above SYSTEM_BASE,
            ApplicationErrorCode otherwise

        Examples:
            >>> ErrorCode.from_value(1501)
            SystemErrorCode(errno=1)
        """
        if is_system_error(code):
            return SystemErrorCode(get_system_error(code))
        return ApplicationErrorCode(code)


@dataclass(frozen=True)
class ApplicationErrorCode(ErrorCode):
    """An error code defined by the client library itself.

    Attributes:
        code: Numeric application code (0 means success)
    """
    code: int

    def __post_init__(self) -> None:
        if not 0 <= self.code <= SYSTEM_BASE:
            raise InvalidParameterError(
                f"Application error code must be in [0, {SYSTEM_BASE}], got {self.code}"
            )

    @property
    def value(self) -> int:
        return self.code


@dataclass(frozen=True)
class SystemErrorCode(ErrorCode):
    """An operating-system error.

    Attributes:
        errno: Raw platform error number (e.g. errno.ENOENT)
    """
    errno: int

    def __post_init__(self) -> None:
        if self.errno < 1:
            raise InvalidParameterError(f"System errno must be positive, got {self.errno}")

    @property
    def value(self) -> int:
        return encode_system_error(self.errno)

    @property
    def is_system(self) -> bool:
        return True


CodeLike = Union[int, ErrorCode]


def as_error_code(code: CodeLike) -> ErrorCode:
    """Normalize an int or ErrorCode into an ErrorCode."""
    if isinstance(code, ErrorCode):
        return code
    return ErrorCode.from_value(code)


@dataclass(frozen=True)
class ErrorDescription:
    """One entry of the error description table.

    Attributes:
        code: Flat numeric error code
        name: Symbolic name (e.g. 'ERROR_TDNF_FILE_NOT_FOUND')
        description: Human-readable message shown to users
    """
    code: int
    name: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'code': self.code,
            'name': self.name,
            'description': self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ErrorDescription':
        """Create ErrorDescription from dictionary."""
        return cls(
            code=int(data['code']),
            name=data.get('name', ''),
            description=data['description'],
        )
