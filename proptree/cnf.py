"""This module :mod:`proptree.cnf` provides the conversion of formulas into
conjunctive normal form (CNF) by the textbook method. Three rewriting passes
are applied, once each and in this order:

1. :meth:`ConjunctiveNormalForm.eliminate_implications` replaces ``A > B``
   with ``~A + B``.

2. :meth:`ConjunctiveNormalForm.move_negations` pushes negations down to the
   atoms using the double negation law and De Morgan's laws. The result is a
   negation normal form (NNF).

3. :meth:`ConjunctiveNormalForm.distribute_or_over_and` applies the
   distributive laws ``(A * B) + C -> (A + C) * (B + C)`` and ``A + (B * C)
   -> (A + B) * (A + C)``.

Each pass traverses the whole tree and returns a new tree. The input tree is
never modified. Since trees are immutable, the result may share unchanged
subtrees with the input.

There is no simplification beyond the distribution, so the result can be
exponentially larger than the input:

>>> from proptree.parser import parse
>>> print(to_cnf(parse('(a * b) + (c * d)')))
(((a + c) * (a + d)) * ((b + c) * (b + d)))
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from .formulas import And, Atom, Formula, Implies, Not, Or

logger = logging.getLogger(__name__)


@dataclass
class ConjunctiveNormalForm:
    """Conjunctive normal form computation. Instances are callable.

    >>> from proptree.parser import parse
    >>> cnf = ConjunctiveNormalForm()
    >>> print(cnf(parse('~(p > q)')))
    (p * (~q))
    >>> cnf.nodes_created
    5

    All passes use explicit stacks instead of recursion, so that the depth of
    the input is not limited by the recursion limit:

    >>> print(cnf(parse(2000 * '~' + 'p')))
    p
    """

    nodes_created: int = 0
    """The number of nodes created during the last call. This is a measure
    for the growth caused by the distribution.
    """

    def __call__(self, f: Formula) -> Formula:
        self.nodes_created = 0
        f = self.eliminate_implications(f)
        logger.debug(f'without implications: {f}')
        f = self.move_negations(f)
        logger.debug(f'NNF: {f}')
        f = self.distribute_or_over_and(f)
        logger.debug(f'CNF: {f}')
        return f

    def _new(self, op: type[Formula], *args: Formula) -> Formula:
        self.nodes_created += 1
        return op(*args)

    def _rebuild(self, f: Formula, args: list[Formula]) -> Formula:
        if all(new is old for new, old in zip(args, f.args)):
            return f
        return self._new(f.op, *args)

    def eliminate_implications(self, f: Formula) -> Formula:
        """Replace each implication ``A > B`` with ``~A + B``, bottom-up.

        >>> from proptree.parser import parse
        >>> print(ConjunctiveNormalForm().eliminate_implications(parse('p > (q > r)')))
        ((~p) + ((~q) + r))
        """
        def combine(g: Formula, args: list[Formula]) -> Formula:
            match g:
                case Implies():
                    return self._new(Or, self._new(Not, args[0]), args[1])
                case Not() | And() | Or():
                    return self._rebuild(g, args)
                case _:
                    assert False, type(g)

        return f.fold(lambda atom: atom, combine)

    def move_negations(self, f: Formula) -> Formula:
        """Move negations towards the atoms:

        * ``~~A`` becomes ``A``,
        * ``~(A + B)`` becomes ``~A * ~B``,
        * ``~(A * B)`` becomes ``~A + ~B``,
        * ``~p`` for an atom ``p`` is a literal and remains unchanged.

        The input must not contain implications. A negated implication is left
        untouched.

        >>> from proptree.parser import parse
        >>> print(ConjunctiveNormalForm().move_negations(parse('~(~~p * ~(q + r))')))
        ((~p) + (q + r))
        """
        # Stack entries are (node, negated, expanded), where negated means that
        # the node stands below a pending negation.
        results: list[Formula] = []
        stack: list[tuple[Formula, bool, bool]] = [(f, False, False)]
        while stack:
            node, negated, expanded = stack.pop()
            match node:
                case Atom():
                    results.append(self._new(Not, node) if negated else node)
                case Not():
                    if negated:
                        stack.append((node.arg, False, False))
                    elif Formula.is_atom(node.arg) or Formula.is_implies(node.arg):
                        results.append(node)
                    else:
                        stack.append((node.arg, True, False))
                case Implies() if negated:
                    results.append(self._new(Not, node))
                case And() | Or() | Implies() if not expanded:
                    stack.append((node, negated, True))
                    stack.append((node.rhs, negated, False))
                    stack.append((node.lhs, negated, False))
                case And() | Or():
                    rhs = results.pop()
                    lhs = results.pop()
                    if negated:
                        results.append(self._new(node.dual(), lhs, rhs))
                    else:
                        results.append(self._rebuild(node, [lhs, rhs]))
                case Implies():
                    rhs = results.pop()
                    lhs = results.pop()
                    results.append(self._rebuild(node, [lhs, rhs]))
                case _:
                    assert False, type(node)
        return results[0]

    def distribute_or_over_and(self, f: Formula) -> Formula:
        """Distribute :class:`Or` over :class:`And`, bottom-up. The input is
        expected to be in NNF. When both sides of a disjunction are already in
        CNF, each clause of the left side is combined with each clause of the
        right side, keeping the nesting of the conjunctions on both sides.

        >>> from proptree.parser import parse
        >>> cnf = ConjunctiveNormalForm()
        >>> print(cnf.distribute_or_over_and(parse('p + (q * r)')))
        ((p + q) * (p + r))
        >>> print(cnf.distribute_or_over_and(parse('(p * q) + (r * s)')))
        (((p + r) * (p + s)) * ((q + r) * (q + s)))
        """
        def combine(g: Formula, args: list[Formula]) -> Formula:
            match g:
                case Or():
                    lhs, rhs = args
                    if Formula.is_and(lhs) or Formula.is_and(rhs):
                        return self._map_clauses(
                            lhs, lambda c: self._map_clauses(
                                rhs, lambda d: self._new(Or, c, d)))
                    return self._rebuild(g, args)
                case Not() | And() | Implies():
                    return self._rebuild(g, args)
                case _:
                    assert False, type(g)

        return f.fold(lambda atom: atom, combine)

    def _map_clauses(self, f: Formula, function: Callable[[Formula], Formula]) -> Formula:
        """Replace each maximal subformula of `f` that is not an :class:`And`
        by its image under `function`, keeping the conjunctions above.
        """
        results: list[Formula] = []
        stack: list[tuple[Formula, bool]] = [(f, False)]
        while stack:
            node, expanded = stack.pop()
            if not Formula.is_and(node):
                results.append(function(node))
            elif expanded:
                rhs = results.pop()
                lhs = results.pop()
                results.append(self._new(And, lhs, rhs))
            else:
                stack.append((node, True))
                stack.append((node.rhs, False))
                stack.append((node.lhs, False))
        return results[0]


def eliminate_implications(f: Formula) -> Formula:
    """
    >>> from proptree.parser import parse
    >>> print(eliminate_implications(parse('p > q')))
    ((~p) + q)
    """
    return ConjunctiveNormalForm().eliminate_implications(f)


def move_negations(f: Formula) -> Formula:
    """
    >>> from proptree.parser import parse
    >>> print(move_negations(parse('~(p + ~q)')))
    ((~p) * q)
    """
    return ConjunctiveNormalForm().move_negations(f)


def distribute_or_over_and(f: Formula) -> Formula:
    """
    >>> from proptree.parser import parse
    >>> print(distribute_or_over_and(parse('(p * q) + r')))
    ((p + r) * (q + r))
    """
    return ConjunctiveNormalForm().distribute_or_over_and(f)


def to_cnf(f: Formula) -> Formula:
    """Compute a conjunctive normal form of `f`.

    >>> from proptree.parser import parse
    >>> print(to_cnf(parse('p > q')))
    ((~p) + q)
    """
    return ConjunctiveNormalForm()(f)
