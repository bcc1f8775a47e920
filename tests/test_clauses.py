import pytest

from proptree import (analyze_cnf_validity, collect_clauses, get_literals,
                      is_tautological_clause, parse, to_cnf)
from proptree.clauses import negate_literal


def test_tautological_clause():
    assert is_tautological_clause(['p', '~p'])
    assert is_tautological_clause(['~q', 'r', 'q'])
    assert not is_tautological_clause(['p', 'q'])
    assert not is_tautological_clause([])


def test_negation_of_negative_literal():
    assert negate_literal('~x1') == 'x1'
    assert negate_literal('x1') == '~x1'


def test_empty_clause_list():
    validity = analyze_cnf_validity([])
    assert validity.is_tautology
    assert (validity.tautology_count, validity.non_tautology_count) == (0, 0)


def test_literals_of_single_literal():
    assert get_literals(parse('p')) == ['p']
    assert get_literals(parse('~p')) == ['~p']


@pytest.mark.parametrize('infix', ['p * q', '~~p', 'p > q', 'p + ~(q + r)'])
def test_literals_of_non_clause(infix):
    with pytest.raises(ValueError):
        get_literals(parse(infix))


def test_collect_clauses_of_left_leaning_chain():
    cnf = parse('((p + q) * r) * (~s + t)')
    assert collect_clauses(cnf) == [['p', 'q'], ['r'], ['~s', 't']]


def test_collect_clauses_keeps_duplicate_literals():
    assert collect_clauses(parse('p + p')) == [['p', 'p']]


@pytest.mark.parametrize('infix, clauses, counts', [
    ('p > q', [['~p', 'q']], (False, 0, 1)),
    ('p + ~p', [['p', '~p']], (True, 1, 0)),
    ('(p * q) + r', [['p', 'r'], ['q', 'r']], (False, 0, 2)),
    ('(p > p) * (q + ~q)', [['~p', 'p'], ['q', '~q']], (True, 2, 0)),
])
def test_end_to_end(infix, clauses, counts):
    collected = collect_clauses(to_cnf(parse(infix)))
    assert collected == clauses
    assert tuple(analyze_cnf_validity(collected)) == counts


def test_mixed_verdict():
    clauses = collect_clauses(to_cnf(parse('p * (q + ~q)')))
    assert tuple(analyze_cnf_validity(clauses)) == (False, 1, 1)
