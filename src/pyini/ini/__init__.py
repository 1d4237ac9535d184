# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/17 13:16:53

from .errors import (
    IniError, IniLoadError, IniIOError, IniSyntaxError,
    IniQueryError, InvalidPathError, SectionNotFoundError,
    KeyNotFoundError, ConversionError
)
from .model import IniSection, IniDocument, convert_value
from .parser import (
    IniParser, LineKind, ParsedLine, classify_line, load, loads
)
