# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/17 13:52:17

"""Line based INI reader.

Every line is exactly one of (tried in this order):

    - blank, or a `; comment`
    - a section header, `[Name]`
    - an assignment, `key = value ; optional comment`

Anything else stops the load with `IniSyntaxError`.
Names are ASCII `\\w+`; values are kept verbatim after trimming.
"""

import logging
import re
from enum import Enum
from io import StringIO, TextIOBase
from os import PathLike, fspath
from typing import IO, NamedTuple

import chardet

from ..abstract import FileHandler
from .errors import IniIOError, IniSyntaxError
from .model import IniDocument

__all__ = [
    'LineKind', 'ParsedLine', 'classify_line',
    'match_comment', 'match_section', 'match_assignment',
    'IniParser', 'load', 'loads',
]

logger = logging.getLogger(__name__)

CHARDET_MIN_CONFIDENCE = 0.8
FALLBACK_ENCODING = 'utf-8'

_COMMENT = re.compile(r'\s*;.*', re.ASCII)
_SECTION = re.compile(r'\s*\[(\w+)\]\s*', re.ASCII)
_ASSIGNMENT = re.compile(r'\s*(\w+)\s*=\s*(.*?)(?:\s*;.*)?\s*', re.ASCII)
_ASCII_SPACE = ' \t\n\r\f\v'


def match_comment(line: str) -> re.Match[str] | None:
    return _COMMENT.fullmatch(line)


def match_section(line: str) -> re.Match[str] | None:
    return _SECTION.fullmatch(line)


def match_assignment(line: str) -> re.Match[str] | None:
    return _ASSIGNMENT.fullmatch(line)


class LineKind(str, Enum):
    BLANK = 'blank'
    COMMENT = 'comment'
    SECTION = 'section'
    ASSIGNMENT = 'assignment'
    INVALID = 'invalid'


class ParsedLine(NamedTuple):
    kind: LineKind
    name: str | None = None  # section or key
    value: str | None = None


def classify_line(line: str) -> ParsedLine:
    """Classify one line (trailing newline allowed).

    Comments go first, so `;[Header]` stays a comment.
    """
    line = line.rstrip('\r\n')
    if not line.strip(_ASCII_SPACE):
        return ParsedLine(LineKind.BLANK)
    if match_comment(line):
        return ParsedLine(LineKind.COMMENT)
    if m := match_section(line):
        return ParsedLine(LineKind.SECTION, m[1])
    if m := match_assignment(line):
        return ParsedLine(LineKind.ASSIGNMENT, m[1], m[2])
    return ParsedLine(LineKind.INVALID)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(fspath(filename))
        self._codec = encoding

    @staticmethod
    def readstream(buf: TextIOBase | IO[str],
                   name: str = '<stream>') -> IniDocument:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        ret = IniDocument()
        this_sect: str | None = None
        lineno = 0
        while True:
            try:
                i = buf.readline()
            except OSError as e:
                raise IniIOError(
                    f'Error reading file: {name}', name) from e
            except UnicodeDecodeError as e:
                raise IniIOError(
                    f'Failed to decode file: {name}', name) from e
            if not i:
                break
            lineno += 1
            kind, key, val = classify_line(i)
            if kind is LineKind.SECTION:
                this_sect = key
                if ret._ensure_section(key):
                    logger.debug(
                        '%s:%d: section [%s] declared again, merging.',
                        name, lineno, key)
            elif kind is LineKind.ASSIGNMENT:
                if this_sect is None:
                    raise IniSyntaxError(
                        f'Variable outside of a section at line {lineno}',
                        lineno, i.rstrip('\r\n'))
                ret._set_entry(this_sect, key, val)
            elif kind is LineKind.INVALID:
                raise IniSyntaxError(
                    f'Syntax error at line {lineno}',
                    lineno, i.rstrip('\r\n'))
        logger.debug('%s: loaded %d section(s) from %d line(s).',
                     name, len(ret), lineno)
        return ret

    def _decode_file(self) -> StringIO:
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise IniIOError(
                f'Error reading file: {self._fn}', self._fn) from e

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < CHARDET_MIN_CONFIDENCE):
            codec = {'encoding': FALLBACK_ENCODING}
        logger.debug('%s: decoding as %s.', self._fn, codec['encoding'])

        try:
            return StringIO(raw.decode(codec['encoding']))
        except (UnicodeDecodeError, LookupError) as e:
            raise IniIOError(
                f'Failed to decode file: {self._fn}', self._fn) from e

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        Raises:
            IniIOError: the file is missing, unreadable or undecodable.
            IniSyntaxError: a line is neither comment, header
                nor assignment.
        """
        try:
            fp = open(self._fn, 'r', encoding=self._codec)
        except (OSError, LookupError) as e:
            raise IniIOError(
                f'Failed to open file: {self._fn}', self._fn) from e
        logger.debug('%s: opened (encoding=%s).', self._fn, self._codec)
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # readstream wraps the `UnicodeDecodeError`, fallback to `chardet`.
            with fp:
                return self.readstream(fp, self._fn)
        except IniIOError as e:
            if not isinstance(e.__cause__, UnicodeDecodeError):
                raise
            logger.debug('%s: not %s, guessing codec with chardet.',
                         self._fn, self._codec or 'the default encoding')
            return self.readstream(self._decode_file(), self._fn)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def load(
    source: str | PathLike[str] | TextIOBase | IO[str],
    encoding: str | None = None
) -> IniDocument:
    """Build an `IniDocument` from a file path or an opened text stream.

    `encoding` only applies to paths; a stream is already decoded.
    """
    if isinstance(source, (str, PathLike)):
        return IniParser(source, encoding).read()
    if encoding is not None:
        raise TypeError('encoding is only accepted with a file path')
    return IniParser.readstream(
        source, str(getattr(source, 'name', '<stream>')))


def loads(text: str) -> IniDocument:
    return IniParser.readstream(StringIO(text), '<string>')
