# Copyright (c) 2017-2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from os import getcwd, makedirs
from os.path import basename, join, splitext
from pkgutil import get_data
from typing import Optional

import regex as re

from jinja2 import Environment
from markupsafe import escape, Markup

from ..pkgdata import __version__
from .errors import RailroadError, RenderError
from .reader import parse_grammar
from .renderer import Renderer
from .translator import Translation, translate

logger = logging.getLogger(__name__)

text_pattern = re.compile(r'<text\s+(?P<attrs>[^>]*?)>\s*(?P<text>.+?)\s*</text>')


def nl2br(text: str) -> Markup:
    return Markup('<br>').join(escape(line) for line in text.split('\n'))


class DocumentTool:
    """
    Tool to create an HTML page documenting the rules of a grammar with
    railroad diagrams, cross-linking the rule references of the diagrams to
    the diagrams of the referenced rules.
    """

    def __init__(self, renderer: Optional[Renderer] = None, *, encoding: str = 'utf-8', errors: str = 'strict') -> None:
        """
        :param renderer: Renderer of the diagrams (default: a new
            :class:`Renderer` without locking).
        :param encoding: Encoding of the grammar files and of the output.
        :param errors: Encoding error handling scheme.
        """
        self._renderer = renderer or Renderer()
        self._encoding = encoding
        self._errors = errors
        env = Environment(trim_blocks=True,
                          lstrip_blocks=True,
                          keep_trailing_newline=False,
                          autoescape=True)
        env.filters['nl2br'] = nl2br
        template_data = get_data(__package__, 'resources/template.html')
        if template_data is None:
            raise ValueError('No HTML template found.')
        self._template = env.from_string(template_data.decode('utf-8'))  # Jinja2 template of the documentation page.

    def process(self, grammar: str, *, out_dir: Optional[str] = None, root: Optional[str] = None, lib_dir: Optional[str] = None) -> str:
        """
        Perform the main steps:

          1. Parse the grammar file.
          2. Translate the rules into diagrams and collect their references.
          3. Render the selected rules into an HTML page and save it.

        :param grammar: Path to the grammar file.
        :param out_dir: Directory to save the page to (default: the current
            working directory). The name of the page is derived from the name
            of the grammar file.
        :param root: Name of the rule to start documenting from. If not
            given, all the rules are documented.
        :param lib_dir: Alternative directory to look for grammar imports.
        :return: Path to the created page.
        :raises RailroadError: If the grammar cannot be parsed or the root rule
            is not defined in it.
        """
        parsed = parse_grammar(grammar, encoding=self._encoding, errors=self._errors, lib_dir=lib_dir)
        translation = translate(parsed)
        if root is not None and root not in translation:
            raise RailroadError(f'Rule {root!r} is not defined in {translation.name!r}.')

        self._analyze(translation, root)
        return self.create_html(translation, out_dir or getcwd(), splitext(basename(grammar))[0] + '.html', comments=parsed.comments, root=root)

    @staticmethod
    def _analyze(translation: Translation, root: Optional[str]) -> None:
        undefined = sorted({target for targets in translation.rule_graph.values() for target in targets if target not in translation})
        if undefined:
            logger.debug('\t%d name(s) referenced but not defined in %r: %s', len(undefined), translation.name, ', '.join(undefined))

        if root is None:
            return

        reachable = set(translation.reachable_rules(root))
        unreachable = [rule for rule in translation if rule not in reachable]
        if unreachable:
            logger.info('\t%d rule(s) unreachable from %r: %s', len(unreachable), root, ', '.join(repr(rule) for rule in unreachable))

    def create_html(self, translation: Translation, out_dir: str, file_name: str, *, comments: Optional[dict[str, str]] = None, root: Optional[str] = None) -> str:
        """
        Create an HTML page of the rules of a grammar and save it to a file.

        :param translation: The translated grammar.
        :param out_dir: Directory to save the page to (created if necessary).
        :param file_name: Name of the page file, also used as the prefix of
            the anchors of the rules.
        :param comments: Documentation comments of the rules (optional).
        :param root: Name of the rule to start documenting from. If not
            given, all the rules are documented.
        :return: Path to the created page.
        """
        html = self.render_html(translation, file_name, comments=comments, root=root)
        makedirs(out_dir, exist_ok=True)
        out_path = join(out_dir, file_name)
        with open(out_path, 'w', encoding=self._encoding, errors=self._errors) as f:
            f.write(html)
        logger.info('\tSaved %s', out_path)
        return out_path

    def render_html(self, translation: Translation, file_name: str, *, comments: Optional[dict[str, str]] = None, root: Optional[str] = None) -> str:
        """
        Create the source of an HTML page of the rules of a grammar.

        A rule whose diagram cannot be rendered is replaced with an error
        message, the rest of the rules are rendered nevertheless.

        :param translation: The translated grammar.
        :param file_name: Prefix of the anchors of the rules.
        :param comments: Documentation comments of the rules (optional).
        :param root: Name of the rule to start documenting from. If not
            given, all the rules are documented.
        :return: The source of the page.
        """
        comments = comments or {}
        rules = translation.reachable_rules(root)
        linkable = {rule for rule in rules if rule in translation}

        rows = []
        for rule in rules:
            rows.append({
                'name': rule,
                'anchor': f'{file_name}_{rule}',
                'svg': self._render_rule(translation, rule, file_name, linkable),
                'comment': comments.get(rule),
            })

        return self._template.render(title=translation.name, rows=rows, encoding=self._encoding, version=__version__)

    def _render_rule(self, translation: Translation, rule: str, file_name: str, linkable: set[str]) -> str:
        diagram = translation.rule_diagrams.get(rule)
        if diagram is None:
            return ''

        try:
            svg = self._renderer.render(rule, diagram)
        except RenderError as e:
            logger.error('%s', e)
            return f'<p class="render-error">{escape(str(e))}</p>'
        return add_links(svg, file_name, linkable)


def add_links(svg: str, file_name: str, rules: set[str]) -> str:
    """
    Wrap the texts of an SVG image that name a rule into links pointing to the
    anchor of the rule. Comments are not linked.

    :param svg: The source of the image.
    :param file_name: Prefix of the anchors of the rules.
    :param rules: The names of the rules that have an anchor.
    :return: The source of the image with links.
    """
    def _link(match):
        if match.group('text') not in rules or 'comment' in match.group('attrs'):
            return match.group(0)
        return f'<a xlink:href="#{file_name}_{match.group("text")}">{match.group(0)}</a>'

    return text_pattern.sub(_link, svg)
