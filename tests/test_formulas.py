import pytest

from proptree import (And, Atom, collect_atoms, evaluate, Formula, Implies,
                      MissingVariableError, Not, Or, parse, to_infix, tree_height)

from .support import assignments

p, q, r = Atom('p'), Atom('q'), Atom('r')


class TestConstruction:

    def test_invalid_atom_names(self):
        with pytest.raises(ValueError):
            Atom('')
        with pytest.raises(ValueError):
            Atom(1)  # type: ignore

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            And(p, 'q')  # type: ignore
        with pytest.raises(ValueError):
            Not('p')  # type: ignore

    def test_equality_and_hash(self):
        assert (p >> q) == Implies(Atom('p'), Atom('q'))
        assert hash(p & q) == hash(And(p, q))
        assert (p & q) != (p | q)
        assert len({p & q, And(p, q), p | q}) == 2

    def test_operators(self):
        assert ~p == Not(p)
        assert p & q == And(p, q)
        assert p | q == Or(p, q)
        assert p >> q == Implies(p, q)


class TestQueries:

    @pytest.mark.parametrize('infix, expected', [
        ('p', 'p'),
        ('~p', '(~p)'),
        ('p * q + r', '((p * q) + r)'),
        ('p > q > r', '(p > (q > r))'),
        ('~(p + q)', '(~(p + q))'),
    ])
    def test_to_infix(self, infix, expected):
        assert to_infix(parse(infix)) == expected
        assert str(parse(infix)) == expected

    @pytest.mark.parametrize('infix, height', [
        ('p', 1),
        ('~p', 2),
        ('p * q', 2),
        ('~p + q', 3),
        ('((p * q) + r) > s', 4),
    ])
    def test_tree_height(self, infix, height):
        assert tree_height(parse(infix)) == height

    def test_none(self):
        assert to_infix(None) == ''
        assert tree_height(None) == 0
        assert collect_atoms(None) == []

    def test_collect_atoms(self):
        assert collect_atoms(parse('q + p * ~q > p10')) == ['p', 'p10', 'q']

    def test_atoms_in_order_of_occurrence(self):
        assert [a.name for a in parse('q + p * ~q').atoms()] == ['q', 'p', 'q']

    def test_deep_tree(self):
        f = p
        for _ in range(5000):
            f = Not(f)
        assert f.height() == 5001
        assert f.atom_names() == ['p']
        assert len(f.to_prefix()) == 5001


class TestEvaluate:

    def test_implies(self):
        f = p >> q
        for a in assignments(['p', 'q']):
            assert f.evaluate(a) == (not a['p'] or a['q'])

    def test_operators(self):
        a = {'p': True, 'q': False}
        assert evaluate(~p, a) is False
        assert evaluate(p & q, a) is False
        assert evaluate(p | q, a) is True
        assert evaluate(q >> p, a) is True

    def test_missing_variable(self):
        with pytest.raises(MissingVariableError) as info:
            parse('p * q').evaluate({'p': False})
        assert info.value.name == 'q'
        assert isinstance(info.value, KeyError)

    def test_both_arguments_are_evaluated(self):
        with pytest.raises(MissingVariableError):
            parse('p * q').evaluate({'p': False})
        with pytest.raises(MissingVariableError):
            parse('p + q').evaluate({'p': True})

    def test_extra_names_are_ignored(self):
        assert parse('p').evaluate({'p': True, 'z': False})


class TestSympy:

    def test_to_sympy_agrees_with_evaluate(self, formula):
        import sympy
        f = parse(formula)
        expr = f.to_sympy()
        for a in assignments(f.atom_names()):
            subs = {sympy.Symbol(name): value for name, value in a.items()}
            assert bool(expr.subs(subs)) == f.evaluate(a)


class TestDeepTrees:

    def test_infix_and_evaluate(self):
        f = p
        for i in range(3000):
            f = Or(f, Atom(f'x{i}')) if i % 2 else Not(f)
        assert f.to_infix().count('(') == 3000
        assert f.evaluate({'p': False} | {f'x{i}': False for i in range(3000)}) is False
        assert f.fold(lambda atom: 1, lambda g, values: max(values) + 1) == f.height()

    def test_sympy(self):
        f = p
        for i in range(2000):
            f = And(f, Atom(f'x{i}'))
        assert len(f.to_sympy().args) == 2001


def test_fold_visits_children_in_order():
    names = parse('(p + q) > ~r').fold(lambda atom: [atom.name],
                                       lambda g, values: sum(values, []) + [g.SYMBOL])
    assert names == ['p', 'q', '+', 'r', '~', '>']


def test_type_narrowing_helpers():
    f = parse('~p > (q * r) + s')
    assert Formula.is_implies(f)
    assert Formula.is_not(f.lhs) and Formula.is_literal(f.lhs)
    assert Formula.is_or(f.rhs) and Formula.is_and(f.rhs.lhs)
    assert Formula.is_atom(f.rhs.rhs) and Formula.is_literal(f.rhs.rhs)
    assert not Formula.is_literal(f.rhs)
