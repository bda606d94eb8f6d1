# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import io
import logging

from contextlib import nullcontext
from typing import Optional

import railroad

from .diagram import Choice, Comment, Diagram, DiagramNode, NonTerminal, OneOrMore, Optional as OptionalNode, Sequence, Terminal, unescape_label, ZeroOrMore
from .errors import RenderError

logger = logging.getLogger(__name__)


class Renderer:
    """
    Render rule diagrams to standalone SVG images with the railroad-diagrams
    library.

    A renderer does not keep state between renders, however, the library
    keeps its configuration in module-level variables. If renderers are used
    concurrently, a shared lock can be passed to serialize rendering.
    """

    def __init__(self, *, lock=None, css: Optional[str] = None) -> None:
        """
        :param lock: Lock object necessary when rendering in parallel (optional).
        :type lock: :class:`threading.Lock` | :class:`multiprocessing.Lock` | None
        :param css: Stylesheet embedded into the images (default: the
            stylesheet of the railroad-diagrams library).
        """
        self._lock = lock or nullcontext()
        self._css = css

    def render(self, rule: str, diagram: Diagram) -> str:
        """
        Render the diagram of a rule.

        :param rule: Name of the rule (used in error reports).
        :param diagram: The diagram to render.
        :return: The SVG source of the diagram.
        :raises RenderError: If the diagram cannot be rendered.
        """
        with self._lock:
            try:
                buf = io.StringIO()
                railroad.Diagram(self._to_railroad(diagram.child)).writeStandalone(buf.write, css=self._css)
                return buf.getvalue()
            except Exception as e:
                logger.debug('Rendering %r failed.', rule, exc_info=e)
                raise RenderError(rule, str(e) or e.__class__.__name__) from e

    def _to_railroad(self, node: DiagramNode):
        if isinstance(node, Sequence):
            return railroad.Sequence(*(self._to_railroad(child) for child in node.children))
        if isinstance(node, Choice):
            return railroad.Choice(node.selected, *(self._to_railroad(alt) for alt in node.alternatives))
        if isinstance(node, OptionalNode):
            return railroad.Optional(self._to_railroad(node.child))
        if isinstance(node, ZeroOrMore):
            return railroad.ZeroOrMore(self._to_railroad(node.child))
        if isinstance(node, OneOrMore):
            return railroad.OneOrMore(self._to_railroad(node.child))
        if isinstance(node, Terminal):
            return railroad.Terminal(unescape_label(node.label))
        if isinstance(node, NonTerminal):
            return railroad.NonTerminal(unescape_label(node.label))
        if isinstance(node, Comment):
            return railroad.Comment(node.text)
        raise ValueError(f'unexpected diagram node {node!r}')
