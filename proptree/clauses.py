"""Clauses of formulas in CNF and a syntactic tautology test.

A clause is represented as a list of literals, and a literal is represented
as a string: the name of an atom for a positive literal, and the name prefixed
with ``~`` for a negative one. A clause is considered a tautology if it
contains some literal together with its negation. This is sufficient but not
necessary for a formula to be valid:

>>> from proptree.parser import parse
>>> from proptree.cnf import to_cnf
>>> analyze_cnf_validity(collect_clauses(to_cnf(parse('p + ~p'))))
CnfValidity(is_tautology=True, tautology_count=1, non_tautology_count=0)
>>> analyze_cnf_validity(collect_clauses(to_cnf(parse('p > q'))))
CnfValidity(is_tautology=False, tautology_count=0, non_tautology_count=1)
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Sequence

from .formulas import And, Atom, Formula, Implies, Not, Or

NEGATION = Not.SYMBOL


class CnfValidity(NamedTuple):
    """The result of :func:`analyze_cnf_validity`.
    """
    is_tautology: bool
    tautology_count: int
    non_tautology_count: int


def negate_literal(literal: str) -> str:
    """
    >>> negate_literal('p'), negate_literal('~p')
    ('~p', 'p')
    """
    if literal.startswith(NEGATION):
        return literal[len(NEGATION):]
    return NEGATION + literal


def get_literals(clause: Formula) -> list[str]:
    """The literals of `clause`, which is a disjunction of literals, from left
    to right.

    >>> from proptree.parser import parse
    >>> get_literals(parse('(p + ~q) + (r + p)'))
    ['p', '~q', 'r', 'p']
    >>> get_literals(parse('p + (q * r)'))
    Traceback (most recent call last):
    ...
    ValueError: (q * r) is not a literal or a disjunction of literals
    """
    literals = []
    stack = [clause]
    while stack:
        node = stack.pop()
        match node:
            case Or():
                stack.append(node.rhs)
                stack.append(node.lhs)
            case Not(arg=Atom() as atom):
                literals.append(NEGATION + atom.name)
            case Atom():
                literals.append(node.name)
            case Not() | And() | Implies():
                raise ValueError(f'{node} is not a literal or a disjunction of literals')
            case _:
                assert False, type(node)
    return literals


def collect_clauses(cnf: Formula) -> list[list[str]]:
    """The clauses of `cnf`, which is a conjunction of clauses, from left to
    right. Nested conjunctions are flattened.

    >>> from proptree.parser import parse
    >>> collect_clauses(parse('(p + q) * (r * (~p + s))'))
    [['p', 'q'], ['r'], ['~p', 's']]
    >>> collect_clauses(parse('~p'))
    [['~p']]
    """
    clauses = []
    stack = [cnf]
    while stack:
        node = stack.pop()
        if Formula.is_and(node):
            stack.append(node.rhs)
            stack.append(node.lhs)
        else:
            clauses.append(get_literals(node))
    return clauses


def is_tautological_clause(clause: Iterable[str]) -> bool:
    """Test whether `clause` contains some literal together with its
    negation. The literals are scanned in order, and the scan stops at the
    first literal whose negation has been seen before.

    >>> is_tautological_clause(['p', 'q', '~p'])
    True
    >>> is_tautological_clause(['p', 'q', 'p'])
    False
    """
    seen: set[str] = set()
    for literal in clause:
        if negate_literal(literal) in seen:
            return True
        seen.add(literal)
    return False


def analyze_cnf_validity(clauses: Sequence[Iterable[str]]) -> CnfValidity:
    """Count tautological and non-tautological clauses. The CNF is reported
    as a tautology if all of its clauses are tautologies. In particular, this
    holds for an empty list of clauses.

    >>> analyze_cnf_validity([['p', '~p'], ['q', 'r', '~q'], ['p', 'q']])
    CnfValidity(is_tautology=False, tautology_count=2, non_tautology_count=1)
    >>> analyze_cnf_validity([])
    CnfValidity(is_tautology=True, tautology_count=0, non_tautology_count=0)
    """
    tautology_count = 0
    non_tautology_count = 0
    for clause in clauses:
        if is_tautological_clause(clause):
            tautology_count += 1
        else:
            non_tautology_count += 1
    return CnfValidity(non_tautology_count == 0, tautology_count, non_tautology_count)
