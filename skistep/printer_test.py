import hypothesis
import pytest

from skistep.parser import parse
from skistep.printer import print_head, print_program, print_term
from skistep.term import APP, ATOM, ROOT, I, K, S, Term
from skistep.testing import for_each, s_terms


@for_each([
    (S(), 'S'),
    (K(), 'K'),
    (I(), 'I'),
    (ATOM('x'), 'x'),
    (ROOT(S()), '#'),
])
def test_print_head(term, expected):
    assert print_head(term) == expected


def test_print_head_unknown_tag():
    with pytest.raises(RuntimeError):
        print_head(Term('BOGUS'))


@for_each([
    (S(), 'S'),
    (ATOM('x'), 'x'),
    (APP(K(), ATOM('x')), '(Kx)'),
    (APP(S(), ATOM('x'), ATOM('y')), '(Sxy)'),
    (APP(S(), APP(K(), ATOM('x')), ATOM('y')), '(S(Kx)y)'),
    (ROOT(APP(S(), I(), I())), '(#(SII))'),
])
def test_print_term(term, expected):
    assert print_term(term) == expected


@for_each([
    ('SII', '(#SII)', 'SII'),
    ('S(Kx)y', '(#S(Kx)y)', 'S(Kx)y'),
    ('(Kx)y', '(#Kxy)', 'Kxy'),
    ('KIS', '(#KIS)', 'KIS'),
    ('x', '(#x)', 'x'),
])
def test_print_parsed(string, expected_term, expected_program):
    term = parse(string)
    assert print_term(term) == expected_term
    assert print_program(term) == expected_program


def test_print_program_empty():
    term = ROOT(I())
    term.pop()
    assert print_term(term) == '#'
    assert print_program(term) == ''


@hypothesis.given(s_terms)
def test_print_term_is_balanced(term):
    string = print_term(term)
    assert string.count('(') == string.count(')')
    assert ' ' not in string


def test_print_term_deep():
    depth = 5000
    term = ATOM('a')
    for _ in range(depth):
        term = APP(ATOM('a'), term)
    assert print_term(term) == '(a' * depth + 'a' + ')' * depth
