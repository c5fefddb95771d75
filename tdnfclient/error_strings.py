"""
Error description lookup for the tdnf client utilities.

Turns an error code into a message fit for users. Resolution order:

1. the error description table (first entry for a code wins),
2. the platform's strerror for system range codes,
3. a fixed "Unknown error" string.

The result is never empty.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from tdnfclient.constants import TDNF_ERROR_TABLE, UNKNOWN_ERROR_STRING
from tdnfclient.errors import OutOfMemoryError, get_system_error, is_system_error
from tdnfclient.logging import logger
from tdnfclient.models import CodeLike, ErrorCode, ErrorDescription


TableEntry = Union[ErrorDescription, Tuple[int, str], Tuple[int, str, str]]


def _to_description(entry: TableEntry) -> ErrorDescription:
    if isinstance(entry, ErrorDescription):
        return entry
    if len(entry) == 2:
        code, description = entry  # type: ignore[misc]
        return ErrorDescription(code=code, name='', description=description)
    code, name, description = entry  # type: ignore[misc]
    return ErrorDescription(code=code, name=name, description=description)


class ErrorTable:
    """Read-only mapping of error codes to descriptions.

    Built from an ordered sequence of entries. When a code appears more
    than once, the first entry is kept and later ones are ignored.
    """

    def __init__(self, entries: Iterable[TableEntry] = ()) -> None:
        self._by_code: Dict[int, ErrorDescription] = {}
        for entry in entries:
            desc = _to_description(entry)
            if desc.code in self._by_code:
                logger.debug(f"Ignoring duplicate error table entry for code {desc.code}")
                continue
            self._by_code[desc.code] = desc

    def lookup(self, code: int) -> Optional[str]:
        """Return the description for ``code``, or None if unmapped."""
        desc = self._by_code.get(code)
        if desc is None or not desc.description:
            return None
        return desc.description

    def get(self, code: int) -> Optional[ErrorDescription]:
        return self._by_code.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __len__(self) -> int:
        return len(self._by_code)

    def __iter__(self) -> Iterator[ErrorDescription]:
        return iter(self._by_code.values())


_default_table: Optional[ErrorTable] = None


def get_default_table() -> ErrorTable:
    """Return the built-in error table, building it on first use."""
    global _default_table
    if _default_table is None:
        _default_table = ErrorTable(TDNF_ERROR_TABLE)
    return _default_table


def load_error_table(path: Path) -> ErrorTable:
    """Load an error table from a JSON file.

    The file holds a list of objects with 'code', 'name' and
    'description' keys, in lookup order.

    Args:
        path: Path to the JSON file

    Returns:
        The loaded table, or the built-in table if the file cannot be
        read or parsed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return ErrorTable(ErrorDescription.from_dict(item) for item in data)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Error table {path} unreadable ({e}); using built-in table.")
        return get_default_table()


def get_error_string(
    code: CodeLike,
    table: Optional[Union[ErrorTable, Iterable[TableEntry]]] = None,
) -> str:
    """Get a human-readable description of an error code.

    Args:
        code: Flat numeric code or tagged ErrorCode
        table: Error table to consult first. Defaults to the built-in table

    Returns:
        Non-empty description string

    Raises:
        OutOfMemoryError: If building the string runs out of memory

    Examples:
        >>> get_error_string(1007)
        'Packagelist was empty'
        >>> get_error_string(1)
        'Unknown error'
    """
    value = code.value if isinstance(code, ErrorCode) else code
    try:
        if table is None:
            table = get_default_table()
        elif not isinstance(table, ErrorTable):
            table = ErrorTable(table)

        message = table.lookup(value)

        if message is None and is_system_error(value):
            try:
                message = os.strerror(get_system_error(value)) or None
            except ValueError:
                message = None

        if message is None:
            message = UNKNOWN_ERROR_STRING
        return str(message)
    except MemoryError as e:
        raise OutOfMemoryError() from e
