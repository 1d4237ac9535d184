# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/17 13:20:41

"""Errors raised while loading or querying an INI document.

Every error carries a `code`, a human readable `message` and a `details`
dict, so callers can either print `str(err)` or inspect the context
(line number, section, suggestions...) themselves.
"""

from typing import Any, Sequence

__all__ = [
    'IniError',
    'IniLoadError', 'IniIOError', 'IniSyntaxError',
    'IniQueryError', 'InvalidPathError', 'SectionNotFoundError',
    'KeyNotFoundError', 'ConversionError',
]


class IniError(Exception):
    """Base error of the package."""
    code = 'INI_ERROR'

    def __init__(
        self, message: str, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return f'[{self.code}] {self.message}'


class IniLoadError(IniError):
    """The document could not be built. Nothing partial is returned."""
    code = 'LOAD_ERROR'


class IniIOError(IniLoadError):
    code = 'LOAD_IO'

    def __init__(self, message: str, filename: str) -> None:
        super().__init__(message, {'filename': filename})
        self.filename = filename


class IniSyntaxError(IniLoadError):
    code = 'SYNTAX'

    def __init__(self, message: str, lineno: int, line: str = '') -> None:
        super().__init__(message, {'lineno': lineno, 'line': line})
        self.lineno = lineno
        self.line = line


class IniQueryError(IniError):
    """A single lookup failed; the document itself is untouched."""
    code = 'QUERY_ERROR'


class InvalidPathError(IniQueryError):
    code = 'INVALID_PATH'

    def __init__(self, path: str) -> None:
        super().__init__(
            "Key must be in 'section.variable' format.", {'path': path})
        self.path = path


class SectionNotFoundError(IniQueryError, KeyError):
    code = 'SECTION_NOT_FOUND'

    def __init__(self, section: str) -> None:
        super().__init__(
            f"Section '{section}' not found.", {'section': section})
        self.section = section


class KeyNotFoundError(IniQueryError, KeyError):
    code = 'KEY_NOT_FOUND'

    def __init__(
        self, section: str, key: str, suggestions: Sequence[str]
    ) -> None:
        suggestions = tuple(suggestions)
        super().__init__(
            f"Variable '{key}' not found in section '{section}'. "
            f"Did you mean one of: {', '.join(suggestions)}",
            {'section': section, 'key': key, 'suggestions': suggestions})
        self.section = section
        self.key = key
        self.suggestions = suggestions


class ConversionError(IniQueryError, ValueError):
    code = 'CONVERSION'

    def __init__(self, value: str, target: str) -> None:
        super().__init__(
            f"Failed to convert value: '{value}' to {target}",
            {'value': value, 'target': target})
        self.value = value
        self.target = target
