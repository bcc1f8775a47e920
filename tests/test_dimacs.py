import pytest

from proptree import DimacsError, dimacs_to_formula, parse, read_dimacs, to_cnf
from proptree.clauses import collect_clauses

EXAMPLE = """\
c a small example
c
p cnf 3 3
1 -2 0
2 3 -1 0
-3 0
"""


def test_formula():
    formula = dimacs_to_formula(EXAMPLE.splitlines())
    assert formula == '(x1 + ~x2) * (x2 + x3 + ~x1) * (~x3)'


def test_formula_parses_to_its_clauses():
    formula = dimacs_to_formula(EXAMPLE.splitlines())
    assert collect_clauses(to_cnf(parse(formula))) == [
        ['x1', '~x2'], ['x2', 'x3', '~x1'], ['~x3']]


def test_literals_after_terminating_zero_are_ignored():
    assert dimacs_to_formula(['1 2 0 3']) == '(x1 + x2)'


def test_clause_without_terminating_zero():
    assert dimacs_to_formula(['1 -2']) == '(x1 + ~x2)'


def test_no_clauses():
    assert dimacs_to_formula(['c nothing', 'p cnf 0 0']) == ''


def test_malformed_literal():
    with pytest.raises(DimacsError, match="line 2: 'x' is not an integer"):
        dimacs_to_formula(['p cnf 1 1', '1 x 0'])


def test_read_dimacs(tmp_path):
    path = tmp_path / 'example.cnf'
    path.write_text(EXAMPLE)
    assert read_dimacs(path) == '(x1 + ~x2) * (x2 + x3 + ~x1) * (~x3)'
    assert read_dimacs(str(path)) == read_dimacs(path)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_dimacs(tmp_path / 'missing.cnf')
