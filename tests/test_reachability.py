# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import pytest

from railroadinator.tool import Alternation, Concatenation, Grammar, reachable_rules, Reference, Rule, translate


graph = {
    'A': ['B', 'C'],
    'B': ['D'],
    'C': [],
    'D': [],
}


@pytest.mark.parametrize('rule_names, rule_graph, root, expected', [
    (['A', 'B', 'C', 'D'], graph, None, ['A', 'B', 'C', 'D']),
    (['D', 'C', 'B', 'A'], graph, None, ['D', 'C', 'B', 'A']),
    (['A', 'B', 'C', 'D'], graph, 'A', ['A', 'B', 'C', 'D']),
    (['A', 'B', 'C', 'D'], graph, 'B', ['B', 'D']),
    (['A', 'B', 'C', 'D'], graph, 'C', ['C']),
    (['A', 'B', 'C', 'D'], graph, 'X', ['X']),
    (['A', 'B'], {'A': ['B'], 'B': ['A']}, 'B', ['B', 'A']),
    (['A'], {'A': ['A']}, 'A', ['A']),
    (['A', 'B', 'C'], {'A': ['B', 'C'], 'B': ['C'], 'C': ['A']}, 'A', ['A', 'B', 'C']),
    (['A', 'B', 'C', 'D'], {'A': ['B', 'C'], 'B': ['D'], 'C': ['D']}, 'A', ['A', 'B', 'C', 'D']),
    (['A'], {'A': ['B', 'EOF']}, 'A', ['A', 'B', 'EOF']),
    ([], {}, None, []),
])
def test_reachable_rules(rule_names, rule_graph, root, expected):
    assert reachable_rules(rule_names, rule_graph, root) == expected


def test_reachable_rules_set_graph():
    selected = reachable_rules(['A', 'B', 'C', 'D'], {name: frozenset(targets) for name, targets in graph.items()}, 'A')
    assert selected[0] == 'A'
    assert set(selected[1:3]) == {'B', 'C'}
    assert selected[3] == 'D'


def test_translation_reachable_rules():
    def refs(*names):
        return Alternation((Concatenation(tuple(Reference(name) for name in names)), ))

    translation = translate(Grammar('Test', (
        Rule('A', refs('C', 'B')),
        Rule('B', refs('D')),
        Rule('C', refs()),
        Rule('D', refs()),
        Rule('E', refs('A')),
    )))

    assert translation.reachable_rules() == ['A', 'B', 'C', 'D', 'E']
    assert translation.reachable_rules('A') == ['A', 'C', 'B', 'D']
    assert translation.reachable_rules('E') == ['E', 'A', 'C', 'B', 'D']
    assert translation.reachable_rules('D') == ['D']
