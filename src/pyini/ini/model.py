# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/17 13:34:02

"""
Basically INI Structure: sections of `key = value` string pairs.

Documents are built once by `ini.parser` and read-only afterwards.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterator, Sequence, TypeVar

from .errors import (
    ConversionError,
    InvalidPathError,
    KeyNotFoundError,
    SectionNotFoundError,
)

T = TypeVar('T')

_TRUE_WORDS = frozenset(('1', 'true', 'yes', 'on'))
_FALSE_WORDS = frozenset(('0', 'false', 'no', 'off'))


def _to_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(value)


def convert_value(value: str, type_: Callable[[str], T]) -> T:
    """Parse a raw value as `type_`.

    `str` hands the value back untouched, `bool` only accepts the usual
    switch words, anything else is called with the raw string
    (`int`, `float`, `Decimal`, `Path`, ...) and must consume it whole.
    """
    if type_ is str:
        return value  # type: ignore[return-value]
    converter: Callable[[str], Any] = _to_bool if type_ is bool else type_
    try:
        # int('４２') would be 42.
        if type_ in (int, float) and not value.isascii():
            raise ValueError(value)
        return converter(value)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(
            value, getattr(type_, '__name__', repr(type_))) from e


class IniSection(Mapping[str, str]):
    """INI 小节字典（只读）。

    键值对按首次声明的顺序保存；重复的键只保留最后一次的值。
    """

    def __init__(self, section_name: str, /, data: dict[str, str]) -> None:
        self._name = section_name
        # shared with the owning IniDocument, never copied.
        self._data = data

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def get(self, key, converter: Callable[[str], Any] = str, default=None):
        if converter is list:
            return self.getlist(key)
        elif converter is bool:
            return self.getbool(key)
        elif key not in self:
            return default
        else:
            return convert_value(self[key], converter)

    # lenient, unlike IniDocument.get_value(path, bool).
    def getbool(self, key: str) -> bool | None:
        if key not in self:
            return None
        return self[key][:1].lower() in ('1', 'y', 't')

    def getlist(self, key: str) -> Sequence[str]:
        return () if key not in self else [
            i.strip() for i in self[key].split(',')]

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(Mapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        ; comment
        [section]
        key233 = val666  ; trailing comment is stripped
        [section]        ; a repeated section merges into the first one
        key233 = val114514
        ```

    Use `get_value('section.key', int)` for typed access.
    """

    def __init__(self) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}

    def __getitem__(self, key: str) -> IniSection:
        if key not in self:
            raise SectionNotFoundError(key)
        return IniSection(key, self.__raw_dicts[key])

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return f'<IniDocument sections={list(self.__raw_dicts)}>'

    def _ensure_section(self, section: str) -> bool:
        """for IniParser. Returns `True` if the section already existed."""
        if section in self.__raw_dicts:
            return True
        self.__raw_dicts[section] = {}
        return False

    def _set_entry(self, section: str, key: str, value: str) -> None:
        """for IniParser."""
        self.__raw_dicts[section][key] = value

    @staticmethod
    def split_path(path: str) -> tuple[str, str]:
        section, sep, key = path.partition('.')
        if not sep:
            raise InvalidPathError(path)
        return section, key

    def get_value(self, path: str, type_: Callable[[str], T] = str) -> T:
        """Look up `section.key` and parse it as `type_`.

        Raises:
            InvalidPathError: `path` has no `.`.
            SectionNotFoundError: no such section.
            KeyNotFoundError: no such key; `.suggestions` lists
                every key of that section.
            ConversionError: the value does not parse as `type_`.
        """
        section, key = self.split_path(path)
        if section not in self.__raw_dicts:
            raise SectionNotFoundError(section)
        pairs = self.__raw_dicts[section]
        if key not in pairs:
            raise KeyNotFoundError(section, key, list(pairs))
        return convert_value(pairs[key], type_)

    def has_value(self, path: str) -> bool:
        section, key = self.split_path(path)
        return key in self.__raw_dicts.get(section, {})

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.copy() for k, v in self.__raw_dicts.items()}
