# Copyright (c) 2017-2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from __future__ import annotations

import logging

from os.path import basename, dirname, exists, join
from typing import Optional

from antlr4 import CommonTokenStream, error, InputStream, ParserRuleContext
from grammarinator.tool.g4 import ANTLRv4Lexer, ANTLRv4Parser

from .comments import extract_comments
from .errors import RailroadError
from .grammar import Alternation, CharacterRange, CharSet, Concatenation, Grammar, GrammarNode, Literal, NotSet, Predicate, Quantified, Reference, Rule, Wildcard

logger = logging.getLogger(__name__)


# Override ConsoleErrorListener to suppress parse issues in non-verbose mode.
class ConsoleListener(error.ErrorListener.ConsoleErrorListener):
    def syntaxError(self, recognizer, offendingSymbol, line, column, msg, e):
        logger.debug('line %d:%d %s', line, column, msg)


error.ErrorListener.ConsoleErrorListener.INSTANCE = ConsoleListener()


def parse_grammar(grammar: str, *, encoding: str = 'utf-8', errors: str = 'strict', lib_dir: Optional[str] = None) -> Grammar:
    """
    Parse an ANTLRv4 grammar file. The rules of the imported grammars are
    appended to the rules of the importing grammar, unless the importing
    grammar defines a rule with the same name. The documentation comments of
    the rules are collected from every parsed file and merged the same way.

    :param grammar: Path to the grammar file.
    :param encoding: Grammar file encoding.
    :param errors: Encoding error handling scheme.
    :param lib_dir: Alternative directory to look for grammar imports beside
        the directory of the grammar.
    :return: The rules of the grammar.
    :raises RailroadError: If a grammar is syntactically incorrect, or the
        grammar or an imported grammar is not found.
    """
    if not exists(grammar):
        raise RailroadError(f'Grammar {grammar} does not exist.')

    work_list = [grammar]
    processed = set()
    result = None

    while work_list:
        grammar = work_list.pop(0)
        if grammar in processed:
            continue
        processed.add(grammar)

        if not exists(grammar):
            raise RailroadError(f'Imported grammar {grammar} does not exist.')

        logger.debug('Parsing %s', grammar)
        with open(grammar, 'r', encoding=encoding, errors=errors) as f:
            src = f.read()
        root = _parse(InputStream(src), grammar)
        current = build_grammar(root)
        comments = extract_comments(src)
        if result is None:
            result = Grammar(current.name, current.rules, comments)
        else:
            names = {rule.name for rule in result.rules}
            rules = tuple(rule for rule in current.rules if rule.name not in names)
            # Comments follow their rules: an imported comment is kept only if its rule is.
            merged = dict(result.comments)
            merged.update((rule.name, comments[rule.name]) for rule in rules if rule.name in comments)
            result = Grammar(result.name, result.rules + rules, merged)

        work_list.extend(_collect_imports(root, dirname(grammar), lib_dir))

    return result


def parse_grammar_string(src: str, name: str = '<string>') -> Grammar:
    """
    Parse an ANTLRv4 grammar from source text. Imports are not followed.

    :param src: Source of the grammar.
    :param name: Name of the source used in error messages.
    :return: The rules of the grammar.
    :raises RailroadError: If the grammar is syntactically incorrect.
    """
    grammar = build_grammar(_parse(InputStream(src), name))
    return Grammar(grammar.name, grammar.rules, extract_comments(src))


def _parse(stream, name: str) -> ParserRuleContext:
    antlr_parser = ANTLRv4Parser(CommonTokenStream(ANTLRv4Lexer(stream)))
    root = antlr_parser.grammarSpec()
    if antlr_parser._syntaxErrors > 0:
        raise RailroadError(f'{antlr_parser._syntaxErrors} syntax error(s) in {basename(name)}')
    return root


def _collect_imports(root: ParserRuleContext, base_dir: str, lib_dir: Optional[str] = None) -> list[str]:
    imports = []
    for prequel in root.prequelConstruct():
        if prequel.delegateGrammars():
            for delegate_grammar in prequel.delegateGrammars().delegateGrammar():
                ident = delegate_grammar.identifier(0)
                grammar_fn = str(ident.RULE_REF() or ident.TOKEN_REF()) + '.g4'
                if lib_dir is not None and exists(join(lib_dir, grammar_fn)):
                    imports.append(join(lib_dir, grammar_fn))
                else:
                    imports.append(join(base_dir, grammar_fn))
    return imports


def build_grammar(root: ParserRuleContext) -> Grammar:
    """
    Convert the parse tree of an ANTLRv4 grammar into grammar nodes.

    Lexer rules of modes follow the rules of the default mode. Labels,
    element options, lexer commands and inline actions are not kept, while
    semantic predicates are kept as :class:`Predicate` nodes.

    :param root: The ``grammarSpec`` context of the grammar.
    :return: The rules of the grammar in declaration order.
    """

    def build_expr(node) -> Optional[GrammarNode]:
        if isinstance(node, (ANTLRv4Parser.RuleAltListContext, ANTLRv4Parser.AltListContext, ANTLRv4Parser.LexerAltListContext)):
            return Alternation(tuple(build_expr(child) for child in node.children if isinstance(child, ParserRuleContext)))

        if isinstance(node, (ANTLRv4Parser.AlternativeContext, ANTLRv4Parser.LexerAltContext)):
            if isinstance(node, ANTLRv4Parser.AlternativeContext):
                children = node.element()
            else:
                children = node.lexerElements().lexerElement() if node.lexerElements() else []
            # Inline actions do not produce any node.
            return Concatenation(tuple(expr for expr in (build_expr(child) for child in children) if expr is not None))

        if isinstance(node, (ANTLRv4Parser.ElementContext, ANTLRv4Parser.LexerElementContext)):
            if node.actionBlock():
                return Predicate() if node.QUESTION() else None

            suffix = None
            if node.ebnfSuffix():
                suffix = node.ebnfSuffix()
            elif hasattr(node, 'ebnf') and node.ebnf() and node.ebnf().blockSuffix():
                suffix = node.ebnf().blockSuffix().ebnfSuffix()

            expr = build_expr(node.children[0])
            if not suffix:
                return expr
            # Non-greedy suffixes (e.g., '*?') are displayed as their greedy counterparts.
            return Quantified(expr, str(suffix.children[0]))

        if isinstance(node, ANTLRv4Parser.LabeledElementContext):
            return build_expr(node.atom() or node.block())

        if isinstance(node, ANTLRv4Parser.RulerefContext):
            return Reference(str(node.RULE_REF()))

        if isinstance(node, (ANTLRv4Parser.LexerAtomContext, ANTLRv4Parser.AtomContext)):
            if node.notSet():
                not_set = node.notSet()
                if not_set.setElement():
                    return NotSet(build_set_element(not_set.setElement()))
                return NotSet(Alternation(tuple(build_set_element(set_element) for set_element in not_set.blockSet().setElement())))

            if isinstance(node, ANTLRv4Parser.LexerAtomContext):
                if node.characterRange():
                    return build_range(node.characterRange())
                if node.LEXER_CHAR_SET():
                    return CharSet(str(node.LEXER_CHAR_SET()))

            for child in node.children:
                if isinstance(child, (ANTLRv4Parser.TerminalContext, ANTLRv4Parser.RulerefContext)):
                    return build_expr(child)

            return Wildcard()

        if isinstance(node, ANTLRv4Parser.TerminalContext):
            if node.TOKEN_REF():
                return Reference(str(node.TOKEN_REF()))
            return Literal(str(node.STRING_LITERAL()))

        # Wrapper contexts (e.g., blocks, labeled alternatives) are represented
        # by their first meaningful descendant.
        if isinstance(node, ParserRuleContext):
            for child in node.children or ():
                expr = build_expr(child)
                if expr is not None:
                    return expr

        return None

    def build_set_element(node) -> GrammarNode:
        if node.characterRange():
            return build_range(node.characterRange())
        if node.LEXER_CHAR_SET():
            return CharSet(str(node.LEXER_CHAR_SET()))
        if node.STRING_LITERAL():
            return Literal(str(node.STRING_LITERAL()))
        if node.TOKEN_REF():
            return Reference(str(node.TOKEN_REF()))
        return Wildcard()

    def build_range(node) -> CharacterRange:
        return CharacterRange(str(node.STRING_LITERAL(0)), str(node.STRING_LITERAL(1)))

    def build_rule(name: str, block, lexer: bool) -> Rule:
        body = build_expr(block)
        if not isinstance(body, Alternation):
            body = Alternation((body if body is not None else Concatenation(), ))
        return Rule(name, body, lexer=lexer)

    ident = root.grammarDecl().identifier()
    rules = []
    for rule_spec in root.rules().ruleSpec():
        if rule_spec.parserRuleSpec():
            parser_rule = rule_spec.parserRuleSpec()
            rules.append(build_rule(str(parser_rule.RULE_REF()), parser_rule.ruleBlock(), lexer=False))
        elif rule_spec.lexerRuleSpec():
            lexer_rule = rule_spec.lexerRuleSpec()
            rules.append(build_rule(str(lexer_rule.TOKEN_REF()), lexer_rule.lexerRuleBlock(), lexer=True))

    for mode_spec in root.modeSpec():
        for lexer_rule in mode_spec.lexerRuleSpec():
            rules.append(build_rule(str(lexer_rule.TOKEN_REF()), lexer_rule.lexerRuleBlock(), lexer=True))

    return Grammar(str(ident.TOKEN_REF() or ident.RULE_REF()), tuple(rules))
