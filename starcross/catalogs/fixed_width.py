"""
This module provides the generic fixed column record parser used by all of the catalog importers.

Catalog specific knowledge is expressed purely as data: a :class:`ColumnLayout` names the fields of a record, gives
the (offset, width) :class:`ColumnExtent` of each one, and specifies the minimum length a line must have to be a data
line at all.  The parser itself knows nothing about any catalog and makes no assumption about delimiters.

Lines shorter than the minimum length (headers, footers, blank lines) are skipped silently by :meth:`ColumnLayout.parse`
returning ``None``.  Fields past the end of a (long enough) line decode as empty strings, so optional trailing field
groups simply come back blank.

The module also provides :func:`parse_float` and :func:`parse_int` for decoding the numeric text of a field.  Blank or
unreadable text decodes to ``None`` (unknown), never to zero.
"""

import re

import math

from dataclasses import dataclass

from types import MappingProxyType

from typing import Optional, NamedTuple, Mapping, Dict, List

import pandas as pd

from starcross._typing import PATH


__all__ = ['ColumnExtent', 'ColumnLayout', 'extract_field', 'parse_float', 'parse_int', 'read_raw_records']


_FLOAT_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_INT_RE = re.compile(r'^[+-]?\d+')


class ColumnExtent(NamedTuple):
    """
    The position of a field within a fixed column record.
    """

    offset: int
    """
    The 0-based offset of the first character of the field.
    """

    width: Optional[int] = None
    """
    The number of characters in the field, or ``None`` if the field runs to the end of the line.
    """

    @property
    def end(self) -> Optional[int]:
        """
        The offset one past the last character of the field, or ``None`` for a field that runs to the end of the line.
        """

        return None if self.width is None else self.offset + self.width


def extract_field(line: str, extent: ColumnExtent) -> str:
    """
    Extracts the trimmed text of one field from a line.

    If the line ends before the end of the extent an empty string is returned.  For an extent without a width the rest
    of the line after the offset is returned (an empty string if the line is not longer than the offset).

    :param line: the record text
    :param extent: the position of the field
    :return: the trimmed field text
    """

    end = extent.end

    if end is None:
        return line[extent.offset:].strip()

    if len(line) < end:
        return ''

    return line[extent.offset:end].strip()


@dataclass(frozen=True)
class ColumnLayout:
    """
    A declarative description of the fixed column layout of a catalog file.

    Layouts are module level constants of each importer; they are not meant to be configured at runtime.
    """

    name: str
    """
    A short name for the layout, used in messages.
    """

    extents: Mapping[str, ColumnExtent]
    """
    The extent of each named field, in record order.
    """

    minimum_length: int
    """
    Lines shorter than this are not data lines and are skipped.
    """

    def __post_init__(self):
        # freeze the extents so layouts can be shared safely
        object.__setattr__(self, 'extents', MappingProxyType(dict(self.extents)))

    @property
    def names(self) -> List[str]:
        """
        The names of the fields in record order.
        """

        return list(self.extents)

    def parse(self, line: str) -> Optional[Dict[str, str]]:
        """
        Parses one line into a dictionary of trimmed field text.

        Trailing newline characters are ignored.  Lines shorter than :attr:`minimum_length` give ``None``.

        :param line: the line to parse
        :return: the field text keyed by field name, or ``None`` for a non data line
        """

        line = line.rstrip('\r\n')

        if len(line) < self.minimum_length:
            return None

        return {name: extract_field(line, extent) for name, extent in self.extents.items()}


def parse_float(text: str) -> Optional[float]:
    """
    Decodes the numeric text of a field as a float.

    The leading numeric part of the text is used (as ``strtod`` would), so trailing flag characters are ignored.  Blank
    text, text without a leading number, and non-finite values decode to ``None``.

    :param text: the field text
    :return: the value or ``None``
    """

    match = _FLOAT_RE.match(text.strip())

    if match is None:
        return None

    value = float(match.group())

    return value if math.isfinite(value) else None


def parse_int(text: str) -> Optional[int]:
    """
    Decodes the numeric text of a field as an integer.

    The leading digits of the text are used.  Blank text or text without leading digits decodes to ``None``.

    :param text: the field text
    :return: the value or ``None``
    """

    match = _INT_RE.match(text.strip())

    if match is None:
        return None

    return int(match.group())


def read_raw_records(path: PATH, layout: ColumnLayout) -> pd.DataFrame:
    """
    Reads every data line of a fixed column file into a table of raw field text.

    This does no field decoding or transformation at all and is mostly useful for inspecting a catalog file.  Non data lines
    are skipped the same way the importers skip them.  The file is read as latin-1, as the importers read it.

    :param path: the catalog file
    :param layout: the layout of the file
    :return: a dataframe with one string column per field of the layout
    """

    records = []

    with open(path, 'r', encoding='latin-1') as catalog_file:
        for line in catalog_file:
            fields = layout.parse(line)
            if fields is not None:
                records.append(fields)

    return pd.DataFrame.from_records(records, columns=layout.names).astype(str)
