# Copyright (c) 2023-2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .comments import extract_comments
from .diagram import Choice, Comment, Diagram, DiagramNode, escape_label, NonTerminal, OneOrMore, Optional, Sequence, Terminal, unescape_label, ZeroOrMore
from .document import add_links, DocumentTool
from .errors import RailroadError, RenderError
from .grammar import Alternation, CharacterRange, CharSet, Concatenation, Grammar, GrammarNode, Literal, NotSet, Predicate, Quantified, Reference, Rule, Wildcard
from .reader import build_grammar, parse_grammar, parse_grammar_string
from .renderer import Renderer
from .translator import reachable_rules, translate, Translation
