# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 13:01:52

"""A small reader for sectioned `key = value` INI files."""

import logging

from .ini import (
    IniDocument, IniSection, IniParser, load, loads,
    IniError, IniLoadError, IniIOError, IniSyntaxError,
    IniQueryError, InvalidPathError, SectionNotFoundError,
    KeyNotFoundError, ConversionError
)

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'load', 'loads',
    'IniError', 'IniLoadError', 'IniIOError', 'IniSyntaxError',
    'IniQueryError', 'InvalidPathError', 'SectionNotFoundError',
    'KeyNotFoundError', 'ConversionError'
]

# applications decide where records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())
