import pytest

from proptree import (And, Atom, build_tree, Implies, infix_to_prefix, Not, Or,
                      parse, ParserError, tokenize)

p, q, r = Atom('p'), Atom('q'), Atom('r')


class TestTokenize:

    def test_whitespace_is_skipped(self):
        assert tokenize('  p\t+\n q ') == ['p', '+', 'q']

    def test_multi_character_atoms(self):
        assert tokenize('x10*y_2') == ['x10', '*', 'y_2']

    def test_atoms_may_start_with_digit(self):
        assert tokenize('1 + 2a') == ['1', '+', '2a']

    def test_other_characters_are_single_tokens(self):
        assert tokenize('p&&q') == ['p', '&', '&', 'q']

    def test_empty(self):
        assert tokenize('') == []
        assert tokenize('   ') == []


class TestInfixToPrefix:

    @pytest.mark.parametrize('infix, prefix', [
        ('p', ['p']),
        ('~p', ['~', 'p']),
        ('~~p', ['~', '~', 'p']),
        ('p > q', ['>', 'p', 'q']),
        ('p + q * r', ['+', 'p', '*', 'q', 'r']),
        ('(p + q) * r', ['*', '+', 'p', 'q', 'r']),
        ('~p * q', ['*', '~', 'p', 'q']),
        ('~(p * q)', ['~', '*', 'p', 'q']),
        ('p + q + r', ['+', '+', 'p', 'q', 'r']),
        ('p * q * r', ['*', '*', 'p', 'q', 'r']),
        ('p > q > r', ['>', 'p', '>', 'q', 'r']),
        ('p > q + r', ['>', 'p', '+', 'q', 'r']),
    ])
    def test_precedence_and_grouping(self, infix, prefix):
        assert infix_to_prefix(infix) == prefix

    def test_accepts_tokens(self):
        assert infix_to_prefix(['p', '*', 'q']) == ['*', 'p', 'q']

    def test_empty(self):
        assert infix_to_prefix('') == []

    def test_unmatched_open_parenthesis_is_dropped(self):
        assert infix_to_prefix('((p * q) + r') == ['+', '*', 'p', 'q', 'r']

    def test_unmatched_close_parenthesis_is_dropped(self):
        assert infix_to_prefix('p * q) + r') == ['+', '*', 'p', 'q', 'r']

    def test_unknown_characters_are_dropped(self):
        assert infix_to_prefix('p $ q') == ['p', 'q']


class TestBuildTree:

    def test_single_atom(self):
        assert build_tree(['p']) == p

    def test_first_popped_is_left_child(self):
        assert build_tree(['>', 'p', 'q']) == Implies(p, q)

    def test_nested(self):
        tree = build_tree(['*', '+', 'p', 'q', '~', 'r'])
        assert tree == And(Or(p, q), Not(r))

    @pytest.mark.parametrize('prefix', [
        [],
        ['~'],
        ['*', 'p'],
        ['p', 'q'],
        ['+', 'p', 'q', 'r'],
        ['p', ''],
    ])
    def test_failure(self, prefix):
        assert build_tree(prefix) is None

    def test_accepts_iterators(self):
        assert build_tree(iter(['~', 'p'])) == Not(p)


class TestParse:

    def test_right_grouping_of_implies(self):
        assert parse('p > q > r') == Implies(p, Implies(q, r))

    def test_left_grouping_of_and(self):
        assert parse('p * q * r') == And(And(p, q), r)

    def test_failure(self):
        with pytest.raises(ParserError):
            parse('p *')
        with pytest.raises(ParserError):
            parse('')
        with pytest.raises(ParserError):
            parse('p q')

    def test_prefix_round_trip(self, formula):
        tree = parse(formula)
        assert build_tree(tree.to_prefix()) == tree

    def test_infix_round_trip(self, formula):
        tree = parse(formula)
        assert parse(tree.to_infix()) == tree
