# Copyright (c) 2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import os

import pytest

from railroadinator.tool import (Alternation, CharacterRange, CharSet, Concatenation, Literal, NotSet, parse_grammar, parse_grammar_string,
                                 Predicate, Quantified, RailroadError, Reference, Rule, Wildcard)


def alt(*alternatives):
    return Alternation(tuple(alternatives))


def cat(*elements):
    return Concatenation(tuple(elements))


def rules_of(src):
    return {rule.name: rule for rule in parse_grammar_string(src).rules}


def test_combined_grammar():
    grammar = parse_grammar_string('''
grammar Expr;

start : expr EOF ;

expr
    : expr ('*' | '/') expr   # MulDiv
    | expr op=('+' | '-') expr  # AddSub
    | INT
    | '(' expr ')'
    ;

INT : [0-9]+ ;
WS : [ \\t\\r\\n]+ -> skip ;
''')

    assert grammar.name == 'Expr'
    assert [rule.name for rule in grammar.rules] == ['start', 'expr', 'INT', 'WS']

    rules = {rule.name: rule for rule in grammar.rules}
    assert rules['start'] == Rule('start', alt(cat(Reference('expr'), Reference('EOF'))))
    assert rules['expr'].body.alternatives[0] == cat(Reference('expr'), alt(cat(Literal("'*'")), cat(Literal("'/'"))), Reference('expr'))
    assert rules['expr'].body.alternatives[1] == cat(Reference('expr'), alt(cat(Literal("'+'")), cat(Literal("'-'"))), Reference('expr'))
    assert rules['expr'].body.alternatives[2] == cat(Reference('INT'))
    assert rules['expr'].body.alternatives[3] == cat(Literal("'('"), Reference('expr'), Literal("')'"))
    assert rules['INT'] == Rule('INT', alt(cat(Quantified(CharSet('[0-9]'), '+'))), lexer=True)
    assert rules['WS'] == Rule('WS', alt(cat(Quantified(CharSet('[ \\t\\r\\n]'), '+'))), lexer=True)


@pytest.mark.parametrize('src, name, expected', [
    ('grammar T; a : b? c* d+ ;', 'a', alt(cat(Quantified(Reference('b'), '?'), Quantified(Reference('c'), '*'), Quantified(Reference('d'), '+')))),
    ('grammar T; a : (b | c)* ;', 'a', alt(cat(Quantified(alt(cat(Reference('b')), cat(Reference('c'))), '*')))),
    ('grammar T; a : b | ;', 'a', alt(cat(Reference('b')), cat())),
    ('grammar T; a : x=b ids+=C ;', 'a', alt(cat(Reference('b'), Reference('C')))),
    ('grammar T; a : . ;', 'a', alt(cat(Wildcard()))),
    ('grammar T; a : ~B ;', 'a', alt(cat(NotSet(Reference('B'))))),
    ('grammar T; a : ~(B | C) ;', 'a', alt(cat(NotSet(alt(Reference('B'), Reference('C')))))),
    ('grammar T; a : {doSomething();} b {isEnabled()}? ;', 'a', alt(cat(Reference('b'), Predicate()))),
    ('grammar T; a : <assoc=right> a \'^\' a | B ;', 'a', alt(cat(Reference('a'), Literal("'^'"), Reference('a')), cat(Reference('B')))),
    ('grammar T; a[int p] returns [int v] : B ;', 'a', alt(cat(Reference('B')))),
    ('grammar T; A : \'a\'..\'z\' ;', 'A', alt(cat(CharacterRange("'a'", "'z'")))),
    ('grammar T; A : \'/*\' .*? \'*/\' -> skip ;', 'A', alt(cat(Literal("'/*'"), Quantified(Wildcard(), '*'), Literal("'*/'")))),
    ('grammar T; A : ~[0-9] ;', 'A', alt(cat(NotSet(CharSet('[0-9]'))))),
    ('grammar T; A : ~(\'a\' | \'b\') ;', 'A', alt(cat(NotSet(alt(Literal("'a'"), Literal("'b'")))))),
    ('grammar T; A : (\'x\' | B)+ ;', 'A', alt(cat(Quantified(alt(cat(Literal("'x'")), cat(Reference('B'))), '+')))),
    ('grammar T; fragment B : [a-z] ;', 'B', alt(cat(CharSet('[a-z]')))),
    ('grammar T; A : {skip();} ;', 'A', alt(cat())),
])
def test_rule(src, name, expected):
    assert rules_of(src)[name].body == expected


def test_lexer_rule_kind():
    rules = rules_of('grammar T; a : B ; B : \'b\' ; fragment C : \'c\' ;')
    assert rules['a'].lexer is False
    assert rules['B'].lexer is True
    assert rules['C'].lexer is True


def test_lexer_modes():
    grammar = parse_grammar_string('''
lexer grammar Str;
OPEN : '"' -> pushMode(STRING) ;
mode STRING;
CLOSE : '"' -> popMode ;
TEXT : ~["]+ ;
''')

    assert grammar.name == 'Str'
    assert [rule.name for rule in grammar.rules] == ['OPEN', 'CLOSE', 'TEXT']
    assert all(rule.lexer for rule in grammar.rules)


def test_syntax_error():
    with pytest.raises(RailroadError):
        parse_grammar_string('grammar T; a : ( b ;')


def test_imports(tmpdir):
    with open(os.path.join(str(tmpdir), 'Main.g4'), 'w') as f:
        f.write('grammar Main;\nimport Common;\n/** Main entry. */\nstart : ID+ ;\n')
    with open(os.path.join(str(tmpdir), 'Common.g4'), 'w') as f:
        f.write('grammar Common;\n/** Common entry. */\nstart : \'x\' ;\n/** Identifier. */\nID : [a-z]+ ;\n')

    grammar = parse_grammar(os.path.join(str(tmpdir), 'Main.g4'))
    assert grammar.name == 'Main'
    assert [rule.name for rule in grammar.rules] == ['start', 'ID']
    assert grammar.rules[0].body == alt(cat(Quantified(Reference('ID'), '+')))
    assert grammar.comments == {'start': 'Main entry.', 'ID': 'Identifier.'}


def test_imports_comments(tmpdir):
    with open(os.path.join(str(tmpdir), 'Main.g4'), 'w') as f:
        f.write('grammar Main;\nimport Common;\nstart : ID ;\n')
    with open(os.path.join(str(tmpdir), 'Common.g4'), 'w') as f:
        f.write('grammar Common;\n/** Common entry. */\nstart : \'x\' ;\nID : [a-z]+ ;\n')

    grammar = parse_grammar(os.path.join(str(tmpdir), 'Main.g4'))
    assert grammar.comments == {}


def test_comments():
    grammar = parse_grammar_string('grammar T;\n/** Entry. */\nstart : B ;\n/** Token. */\nfragment B : \'b\' ;\n')
    assert grammar.comments == {'start': 'Entry.', 'B': 'Token.'}


def test_imports_lib_dir(tmpdir):
    lib_dir = tmpdir.mkdir('lib')
    with open(os.path.join(str(tmpdir), 'Main.g4'), 'w') as f:
        f.write('grammar Main;\nimport Common;\nstart : ID ;\n')
    with open(os.path.join(str(lib_dir), 'Common.g4'), 'w') as f:
        f.write('lexer grammar Common;\nID : [a-z]+ ;\n')

    grammar = parse_grammar(os.path.join(str(tmpdir), 'Main.g4'), lib_dir=str(lib_dir))
    assert [rule.name for rule in grammar.rules] == ['start', 'ID']


def test_missing_import(tmpdir):
    with open(os.path.join(str(tmpdir), 'Main.g4'), 'w') as f:
        f.write('grammar Main;\nimport Missing;\nstart : ID ;\n')

    with pytest.raises(RailroadError, match='^Imported grammar .*Missing.g4 does not exist'):
        parse_grammar(os.path.join(str(tmpdir), 'Main.g4'))


def test_missing_grammar(tmpdir):
    with pytest.raises(RailroadError, match='^Grammar .*Main.g4 does not exist'):
        parse_grammar(os.path.join(str(tmpdir), 'Main.g4'))
