import pytest

from proptree import parse, Row, truth_table


def test_rows_and_order():
    table = truth_table(parse('a * (b + c)'))
    assert table.atoms == ('a', 'b', 'c')
    assert len(table) == 8
    assert [row.values for row in table.rows][:3] == [
        (False, False, False), (False, False, True), (False, True, False)]
    assert table.rows[-1] == Row((True, True, True), True)
    assert [row.result for row in table.rows] == [
        False, False, False, False, False, True, True, True]


def test_results_agree_with_evaluate(formula):
    tree = parse(formula)
    table = truth_table(tree)
    assert len(table) == 2 ** len(tree.atom_names())
    for assignment, row in zip(table.assignments(), table.rows):
        assert tree.evaluate(assignment) == row.result


def test_repeated_atoms_are_one_column():
    assert truth_table(parse('p + ~p * p')).atoms == ('p',)


def test_format():
    lines = truth_table(parse('~x')).format().splitlines()
    assert lines == [
        '     x    Result',
        '----------------',
        '     0         1',
        '     1         0',
    ]


def test_empty_tree():
    with pytest.raises(ValueError, match='parse tree is empty'):
        truth_table(None)
