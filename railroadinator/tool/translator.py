# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from collections import deque
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .diagram import Choice, Comment, Diagram, DiagramNode, escape_label, NonTerminal, OneOrMore, Optional as OptionalNode, Sequence, Terminal, ZeroOrMore
from .grammar import Alternation, CharacterRange, CharSet, Concatenation, Grammar, GrammarNode, Literal, NotSet, Predicate, Quantified, Reference, Wildcard

logger = logging.getLogger(__name__)


class Translation:
    """
    Result of translating a grammar: the diagram of every rule and the graph
    of rule references. Both are read-only.
    """

    def __init__(self, name: str, rule_diagrams: dict[str, Diagram], edges: dict[str, dict[str, None]]) -> None:
        """
        :param name: Name of the translated grammar.
        :param rule_diagrams: Diagrams of the rules in declaration order.
        :param edges: Referenced names per rule, in the order of their first reference.
        """
        self.name = name
        self._rule_diagrams = MappingProxyType(dict(rule_diagrams))
        self._edges = MappingProxyType({rule: tuple(targets) for rule, targets in edges.items()})
        self._rule_graph = MappingProxyType({rule: frozenset(targets) for rule, targets in self._edges.items()})

    @property
    def rule_diagrams(self) -> Mapping[str, Diagram]:
        """
        Mapping from rule name to its diagram in declaration order.
        """
        return self._rule_diagrams

    @property
    def rule_graph(self) -> Mapping[str, frozenset[str]]:
        """
        Mapping from rule name to the set of names it references. Rules
        without references have no entry.
        """
        return self._rule_graph

    def reachable_rules(self, root: Optional[str] = None) -> list[str]:
        """
        Names of the rules to document. See :func:`reachable_rules`.
        """
        return reachable_rules(self._rule_diagrams, self._edges, root)

    def __contains__(self, name: object) -> bool:
        return name in self._rule_diagrams

    def __iter__(self):
        return iter(self._rule_diagrams)

    def __len__(self) -> int:
        return len(self._rule_diagrams)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.name!r}, rules={len(self)})'


def translate(grammar: Grammar) -> Translation:
    """
    Translate the rules of a grammar into railroad diagrams and collect the
    references between the rules.

    The translation never fails on a grammar built from the nodes of
    :mod:`railroadinator.tool.grammar`; nodes of unknown kind are displayed
    as wildcards.

    :param grammar: The grammar to translate.
    :return: The diagrams and the reference graph of the grammar.
    """
    rule_diagrams: dict[str, Diagram] = {}
    # Inner dicts are used as insertion-ordered sets.
    edges: dict[str, dict[str, None]] = {}

    def translate_expr(node: GrammarNode, rule: str, lexer: bool) -> DiagramNode:
        if isinstance(node, Alternation):
            return Choice(0, [translate_expr(alt, rule, lexer) for alt in node.alternatives])

        if isinstance(node, Concatenation):
            if not node.elements:
                return Comment('epsilon')
            return Sequence([translate_expr(element, rule, lexer) for element in node.elements])

        if isinstance(node, Quantified):
            inner = translate_expr(node.element, rule, lexer)
            if node.suffix == '?':
                return OptionalNode(inner)
            if node.suffix == '*':
                return ZeroOrMore(inner)
            return OneOrMore(inner)

        if isinstance(node, Predicate):
            return Comment('predicate')

        if isinstance(node, CharacterRange):
            return Terminal(f'{escape_label(node.lower)} .. {escape_label(node.upper)}')

        if isinstance(node, (Literal, CharSet)):
            return Terminal(escape_label(node.text))

        if isinstance(node, Reference):
            edges.setdefault(rule, {})[node.name] = None
            return NonTerminal(node.name)

        if isinstance(node, NotSet):
            return Sequence([Comment('not'), translate_expr(node.element, rule, lexer)])

        if not isinstance(node, Wildcard):
            logger.debug('Unknown element %r in rule %r is displayed as a wildcard.', node, rule)
        return Terminal('any char') if lexer else NonTerminal('any token')

    for rule in grammar.rules:
        if rule.name in rule_diagrams:
            logger.warning('Rule %r is defined more than once in %r, keeping the first definition.', rule.name, grammar.name)
            continue
        rule_diagrams[rule.name] = Diagram(translate_expr(rule.body, rule.name, rule.lexer))

    logger.debug('Translated %d rule(s) of %r.', len(rule_diagrams), grammar.name)
    return Translation(grammar.name, rule_diagrams, edges)


def reachable_rules(rule_names: Iterable[str], rule_graph: Mapping[str, Iterable[str]], root: Optional[str] = None) -> list[str]:
    """
    Select the rules to document.

    Without a root, all the rules are selected in declaration order.
    Otherwise, the root and every name transitively referenced from it are
    selected in breadth-first order. Names without an entry in the graph (even
    the root) have no outgoing references.

    :param rule_names: Names of the rules in declaration order.
    :param rule_graph: Mapping from rule name to the names it references.
    :param root: Name of the rule to start from (optional).
    :return: The selected names, each only once.
    """
    if root is None:
        return list(rule_names)

    visited = {root}
    selected = []
    work_list = deque([root])
    while work_list:
        name = work_list.popleft()
        selected.append(name)
        for target in rule_graph.get(name, ()):
            if target not in visited:
                visited.add(target)
                work_list.append(target)
    return selected
