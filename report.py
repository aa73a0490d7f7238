#
# Copyright (c) 2024-2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import sys
import textwrap
import unicodedata


from typing import Sequence, Any, TextIO
from abc import ABC, abstractmethod


def display_width(s:str) -> int:
    # Full-width (CJK) characters take two terminal columns
    return sum(2 if unicodedata.east_asian_width(c) in 'FW' else 1 for c in s)


def _pad(s:str, width:int, just:str) -> str:
    padding = max(width - display_width(s), 0)
    if just == 'l':
        return s + ' '*padding
    elif just == 'r':
        return ' '*padding + s
    else:
        assert just == 'c'
        left = padding // 2
        return ' '*left + s + ' '*(padding - left)


class Report(ABC):

    @abstractmethod
    def write_heading(self, heading:str) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def write_paragraph(self, paragraph:str) -> None:  # pragma: no cover
        raise NotImplementedError

    @abstractmethod
    def write_table(self, rows:Sequence[Sequence[Any]], header:Sequence[Any]|None=None, just:str|None=None, indent:str='') -> None:  # pragma: no cover
        raise NotImplementedError

    @staticmethod
    def format(field:Any) -> str:
        if field is None or field != field:
            return ''
        else:
            return str(field)


class TextReport(Report):

    def __init__(self, stream:TextIO=sys.stdout):
        self.stream = stream
        self.heading_sep = ''

    def write_heading(self, heading:str) -> None:
        if self.stream.isatty():
            # Ansi escape
            _csi = '\33['
            heading = _csi + '1m' + heading + _csi + '0m'
        self.stream.write(self.heading_sep + heading + '\n\n')
        self.heading_sep = ''

    def write_paragraph(self, paragraph:str) -> None:
        paragraph = '\n'.join(textwrap.wrap(paragraph, width=80))
        self.stream.write(paragraph + '\n\n')
        self.heading_sep = '\n'

    def write_table(self, rows:Sequence[Sequence[Any]], header:Sequence[Any]|None=None, just:str|None=None, indent:str='') -> None:
        table = [[self.format(cell) for cell in row] for row in rows]
        if header is not None:
            table.insert(0, [self.format(cell) for cell in header])

        ncols = max(len(row) for row in table)
        assert all(len(row) == ncols for row in table)
        if just is None:
            just = 'c' * ncols
        assert len(just) == ncols

        widths = [max(display_width(row[c]) for row in table) for c in range(ncols)]

        sep = '  '
        rule = '─' * (sum(widths) + len(sep)*(ncols - 1))

        lines = [sep.join(_pad(cell, width, j) for cell, width, j in zip(row, widths, just)).rstrip() for row in table]
        if header is not None:
            lines.insert(1, rule)

        for line in lines:
            self.stream.write(indent + line + '\n')
        self.stream.write('\n')

        self.heading_sep = '\n'
