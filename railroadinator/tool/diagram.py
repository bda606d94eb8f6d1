# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

"""
Railroad diagram primitives. The string form of every node is its
diagram specification, e.g.::

    >>> str(Diagram(Choice(0, [Sequence([Terminal('[a-z]'), NonTerminal('b')])])))
    "Diagram(Choice(0, Sequence(Terminal('[a-z]'), NonTerminal('b'))))"

Labels are stored escaped (see :func:`escape_label`), since they are embedded
verbatim between single quotes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


def escape_label(text: str) -> str:
    """
    Escape text to be embedded as a single-quoted label. Backslashes followed
    by ``u`` are doubled (to avoid their reinterpretation as unicode escapes)
    and single quotes are escaped.
    """
    return text.replace('\\u', '\\\\u').replace('\'', '\\\'')


def unescape_label(label: str) -> str:
    """
    Inverse of :func:`escape_label`, i.e., the text to be displayed for a label.
    """
    return label.replace('\\\'', '\'').replace('\\\\u', '\\u')


class DiagramNode:
    """
    Base class of diagram primitives.
    """

    def __repr__(self) -> str:
        return str(self)


@dataclass(frozen=True, repr=False)
class Sequence(DiagramNode):
    children: tuple[DiagramNode, ...]

    def __init__(self, children: Iterable[DiagramNode]) -> None:
        object.__setattr__(self, 'children', tuple(children))

    def __str__(self) -> str:
        return f'Sequence({", ".join(str(child) for child in self.children)})'


@dataclass(frozen=True, repr=False)
class Choice(DiagramNode):
    selected: int
    alternatives: tuple[DiagramNode, ...]

    def __init__(self, selected: int, alternatives: Iterable[DiagramNode]) -> None:
        object.__setattr__(self, 'selected', selected)
        object.__setattr__(self, 'alternatives', tuple(alternatives))

    def __str__(self) -> str:
        return f'Choice({", ".join([str(self.selected)] + [str(alt) for alt in self.alternatives])})'


@dataclass(frozen=True, repr=False)
class Optional(DiagramNode):
    child: DiagramNode

    def __str__(self) -> str:
        return f'Optional({self.child})'


@dataclass(frozen=True, repr=False)
class ZeroOrMore(DiagramNode):
    child: DiagramNode

    def __str__(self) -> str:
        return f'ZeroOrMore({self.child})'


@dataclass(frozen=True, repr=False)
class OneOrMore(DiagramNode):
    child: DiagramNode

    def __str__(self) -> str:
        return f'OneOrMore({self.child})'


@dataclass(frozen=True, repr=False)
class Terminal(DiagramNode):
    label: str

    def __str__(self) -> str:
        return f'Terminal(\'{self.label}\')'


@dataclass(frozen=True, repr=False)
class NonTerminal(DiagramNode):
    label: str

    def __str__(self) -> str:
        return f'NonTerminal(\'{self.label}\')'


@dataclass(frozen=True, repr=False)
class Comment(DiagramNode):
    text: str

    def __str__(self) -> str:
        return f'Comment(\'{self.text}\')'


@dataclass(frozen=True, repr=False)
class Diagram(DiagramNode):
    """
    Top-level unit of a rule's diagram.
    """
    child: DiagramNode

    def __str__(self) -> str:
        return f'Diagram({self.child})'
