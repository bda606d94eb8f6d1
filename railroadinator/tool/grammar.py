# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

"""
The closed set of grammar constructs the translator understands. The nodes
are immutable and are usually built by :func:`railroadinator.tool.build_grammar`
from an ANTLR parse tree, but they can be instantiated directly as well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Alternation:
    """
    Alternatives separated by ``|`` (a rule body, a block or a set in
    ``~(...)``). Contains at least one alternative.
    """
    alternatives: tuple[GrammarNode, ...]


@dataclass(frozen=True)
class Concatenation:
    """
    Elements of a single alternative in source order. Empty for an empty
    alternative.
    """
    elements: tuple[GrammarNode, ...] = ()


@dataclass(frozen=True)
class Quantified:
    """
    Element followed by an EBNF suffix (``?``, ``*`` or ``+``).
    """
    element: GrammarNode
    suffix: str


@dataclass(frozen=True)
class Predicate:
    """
    Semantic predicate (``{...}?``). Its source is not preserved.
    """


@dataclass(frozen=True)
class CharacterRange:
    """
    Character range (``'a'..'z'``). Bounds are kept in source form, quotes included.
    """
    lower: str
    upper: str


@dataclass(frozen=True)
class Literal:
    """
    String literal in source form, quotes included (e.g., ``'if'``).
    """
    text: str


@dataclass(frozen=True)
class CharSet:
    """
    Lexer character set in source form, brackets included (e.g., ``[a-z_]``).
    """
    text: str


@dataclass(frozen=True)
class Reference:
    """
    Reference to a parser rule, a lexer rule or a token.
    """
    name: str


@dataclass(frozen=True)
class NotSet:
    """
    Negated set (``~x`` or ``~(x | y)``).
    """
    element: GrammarNode


@dataclass(frozen=True)
class Wildcard:
    """
    The ``.`` wildcard, also used for atoms of unrecognized shape.
    """


GrammarNode = Union[Alternation, Concatenation, Quantified, Predicate, CharacterRange, Literal, CharSet, Reference, NotSet, Wildcard]


@dataclass(frozen=True)
class Rule:
    """
    Parser rule (``lexer=False``) or lexer rule (``lexer=True``).
    """
    name: str
    body: Alternation
    lexer: bool = False


@dataclass(frozen=True)
class Grammar:
    """
    Rules of a grammar in declaration order, and the documentation comments
    of the rules (not taken into account when comparing grammars).
    """
    name: str
    rules: tuple[Rule, ...] = ()
    comments: dict[str, str] = field(default_factory=dict, compare=False)
