from __future__ import annotations

from abc import abstractmethod
from typing import Any, Callable, ClassVar, Iterator, Mapping, Optional, Self, TypeVar

import sympy
from typing_extensions import TypeIs

ρ = TypeVar('ρ')


class MissingVariableError(KeyError):
    """Raised by :meth:`Formula.evaluate` when an atom of the formula has no
    entry in the assignment. The missing name is available as :attr:`name`.

    >>> try:
    ...     Atom('p').evaluate({})
    ... except MissingVariableError as exc:
    ...     exc.name
    'p'
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'no truth value assigned to atom {self.name!r}'


class Formula:
    r"""This abstract base class implements representations of and methods on
    propositional formulas recursively built from atoms using the operators
    :math:`\lnot`, :math:`\land`, :math:`\lor`, and :math:`\longrightarrow`.

    Instances are nodes of an expression tree. They are immutable: the
    children of a node are the tuple :attr:`args`, which is fixed when the node
    is created. All transformations, in particular the conversion to CNF,
    build new nodes instead of modifying existing ones.

    As an abstract base class, :class:`Formula` cannot be instantiated.
    """

    SYMBOL: ClassVar[str]
    """The token representing the operator in infix and prefix notation.
    """

    PRECEDENCE: ClassVar[int]
    """The binding strength of the operator within infix notation. Higher
    values bind stronger.
    """

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The children of the node as a tuple.

        .. seealso::
            * :attr:`BinaryFormula.lhs <.boolean.BinaryFormula.lhs>` \
                -- left child of :class:`And`, :class:`Or`, :class:`Implies`
            * :attr:`BinaryFormula.rhs <.boolean.BinaryFormula.rhs>` \
                -- right child of :class:`And`, :class:`Or`, :class:`Implies`
            * :attr:`Not.arg <.boolean.Not.arg>` \
                -- the one child of :class:`Not`
        """
        return self._args

    @args.setter
    def args(self, args: tuple[Any, ...]) -> None:
        self._args = args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> Atom('p') & Atom('q')
        And(Atom('p'), Atom('q'))
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        Note that this is not a logical operator for equivalence.

        >>> Atom('p') >> Atom('q') == Atom('p') >> Atom('q')
        True
        >>> Atom('p') | Atom('q') == Atom('q') | Atom('p')
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`Not`.

        >>> ~ Atom('p')
        Not(Atom('p'))
        """
        return Not(self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply :class:`Or`.

        >>> Atom('p') | Atom('q') | Atom('r')
        Or(Or(Atom('p'), Atom('q')), Atom('r'))
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that is suitable
        for use as an input.
        """
        return f'{self.op.__name__}({", ".join(repr(arg) for arg in self.args)})'

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`Implies`.

        >>> Atom('p') >> Atom('q')
        Implies(Atom('p'), Atom('q'))
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Representation of the Formula used in printing. This is the fully
        parenthesized infix form, see :meth:`to_infix`.
        """
        return self.to_infix()

    def atoms(self) -> Iterator[Atom]:
        """An iterator over all occurrences of :class:`Atom` in `self`, from
        left to right. Atoms occurring several times are reported once for each
        occurrence.

        >>> p, q = Atom('p'), Atom('q')
        >>> list(((p & q) | ~ p).atoms())
        [Atom('p'), Atom('q'), Atom('p')]

        The traversal uses an explicit stack, so that deep trees, as obtained
        from large DIMACS files, do not exhaust the recursion limit.
        """
        stack: list[Formula] = [self]
        while stack:
            node = stack.pop()
            if Formula.is_atom(node):
                yield node
            else:
                stack.extend(reversed(node.args))

    def atom_names(self) -> list[str]:
        """The names of all atoms occurring in `self`, without duplicates, in
        ascending order. This order determines the columns of the truth table.

        >>> p, q, x1 = Atom('p'), Atom('q'), Atom('x1')
        >>> ((q & p) >> (x1 | ~ q)).atom_names()
        ['p', 'q', 'x1']
        """
        return sorted({atom.name for atom in self.atoms()})

    def clauses(self) -> list[list[str]]:
        """The clauses of `self`, which must be in CNF.

        >>> from proptree.parser import parse
        >>> parse('(p + q) * ~r').clauses()
        [['p', 'q'], ['~r']]

        .. seealso:: :func:`.clauses.collect_clauses`
        """
        from ..clauses import collect_clauses
        return collect_clauses(self)

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """The truth value of `self` under `assignment`, which maps atom names
        to truth values. Both arguments of :class:`And` and :class:`Or` are
        always evaluated. :class:`Implies` is evaluated as ``~lhs | rhs``.

        >>> p, q = Atom('p'), Atom('q')
        >>> (p >> q).evaluate({'p': True, 'q': False})
        False
        >>> (p >> q).evaluate({'p': False, 'q': False})
        True
        >>> (p & q).evaluate({'p': True})
        Traceback (most recent call last):
        ...
        proptree.formulas.formula.MissingVariableError: no truth value assigned to atom 'q'
        """
        def value(atom: Atom) -> bool:
            try:
                return bool(assignment[atom.name])
            except KeyError:
                raise MissingVariableError(atom.name) from None

        def combine(f: Formula, args: list[bool]) -> bool:
            match f:
                case Not():
                    return not args[0]
                case And():
                    return args[0] and args[1]
                case Or():
                    return args[0] or args[1]
                case Implies():
                    return not args[0] or args[1]
                case _:
                    assert False, type(f)

        return self.fold(value, combine)

    def fold(self, map_atoms: Callable[[Atom], ρ],
             combine: Callable[[Formula, list[ρ]], ρ]) -> ρ:
        """Compute a value bottom-up. Each atom is mapped with `map_atoms`.
        Each inner node `f` yields ``combine(f, values)``, where `values` are
        the results for ``f.args`` in order. All children are processed before
        their parent, from left to right.

        >>> p, q = Atom('p'), Atom('q')
        >>> (p >> ~ q).fold(lambda atom: 1, lambda f, values: 1 + sum(values))
        4

        The traversal uses an explicit stack. This applies to all methods
        based on it, in particular :meth:`evaluate` and :meth:`to_infix`, and
        to the passes of :class:`.cnf.ConjunctiveNormalForm`.
        """
        results: list[ρ] = []
        stack: list[tuple[Formula, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if Formula.is_atom(node):
                results.append(map_atoms(node))
            elif expanded:
                n = len(node.args)
                values = results[-n:]
                del results[-n:]
                results.append(combine(node, values))
            else:
                stack.append((node, True))
                stack.extend((arg, False) for arg in reversed(node.args))
        return results[0]

    def height(self) -> int:
        """The height of `self` is the number of nodes on a longest path from
        the root to a leaf of the expression tree. A single atom has height 1.

        >>> p, q, r = Atom('p'), Atom('q'), Atom('r')
        >>> p.height()
        1
        >>> (p >> (q & ~ r)).height()
        4
        """
        height = 0
        stack: list[tuple[Formula, int]] = [(self, 1)]
        while stack:
            node, level = stack.pop()
            height = max(height, level)
            for arg in node.args if not Formula.is_atom(node) else ():
                stack.append((arg, level + 1))
        return height

    @staticmethod
    def is_and(f: Formula) -> TypeIs[And]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.And`.
        """
        return isinstance(f, And)

    @staticmethod
    def is_atom(f: Formula) -> TypeIs[Atom]:
        """Type narrowing :func:`isinstance` test for :class:`.atomic.Atom`.
        """
        return isinstance(f, Atom)

    @staticmethod
    def is_implies(f: Formula) -> TypeIs[Implies]:
        """Type narrowing :func:`isinstance` test for
        :class:`.boolean.Implies`.
        """
        return isinstance(f, Implies)

    @staticmethod
    def is_literal(f: Formula) -> bool:
        """Test whether `f` is an atom or a negated atom.

        >>> Formula.is_literal(~ Atom('p')), Formula.is_literal(~ ~ Atom('p'))
        (True, False)
        """
        return Formula.is_atom(f) or (Formula.is_not(f) and Formula.is_atom(f.arg))

    @staticmethod
    def is_not(f: Formula) -> TypeIs[Not]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.Not`.
        """
        return isinstance(f, Not)

    @staticmethod
    def is_or(f: Formula) -> TypeIs[Or]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.Or`.
        """
        return isinstance(f, Or)

    def to_cnf(self) -> Formula:
        """Convert to Conjunctive Normal Form by eliminating implications,
        moving negations to the atoms, and distributing :class:`Or` over
        :class:`And`. The result is a new tree; `self` is not modified.

        >>> from proptree.parser import parse
        >>> print(parse('(p * q) + r').to_cnf())
        ((p + r) * (q + r))

        .. seealso:: :class:`.cnf.ConjunctiveNormalForm`
        """
        from ..cnf import ConjunctiveNormalForm
        return ConjunctiveNormalForm()(self)

    def to_infix(self) -> str:
        """Fully parenthesized infix representation. Atoms are rendered as
        their names, negations as ``(~arg)``, and binary operators as ``(lhs op
        rhs)``. There is no omission of parentheses based on precedence.

        >>> p, q, r = Atom('p'), Atom('q'), Atom('r')
        >>> (p >> (q & ~ r)).to_infix()
        '(p > (q * (~r)))'
        """
        def combine(f: Formula, args: list[str]) -> str:
            match f:
                case Not():
                    return f'({Not.SYMBOL}{args[0]})'
                case And() | Or() | Implies():
                    return f'({args[0]} {f.SYMBOL} {args[1]})'
                case _:
                    assert False, type(f)

        return self.fold(lambda atom: atom.name, combine)

    def to_prefix(self) -> list[str]:
        """Prefix (Polish) representation as a list of tokens. This is the
        input format of :func:`.parser.build_tree`.

        >>> p, q, r = Atom('p'), Atom('q'), Atom('r')
        >>> (p >> (q & ~ r)).to_prefix()
        ['>', 'p', '*', 'q', '~', 'r']
        """
        tokens: list[str] = []
        stack: list[Formula] = [self]
        while stack:
            node = stack.pop()
            if Formula.is_atom(node):
                tokens.append(node.name)
            else:
                tokens.append(node.SYMBOL)
                stack.extend(reversed(node.args))
        return tokens

    def to_sympy(self) -> sympy.logic.boolalg.Boolean:
        """Provide an equivalent sympy Boolean expression. Atoms are mapped to
        :class:`sympy.Symbol` with the same name.

        >>> p, q = Atom('p'), Atom('q')
        >>> (p >> ~ q).to_sympy()
        Implies(p, ~q)
        """
        def combine(f: Formula, args: list[sympy.logic.boolalg.Boolean]) \
                -> sympy.logic.boolalg.Boolean:
            match f:
                case Not():
                    return sympy.Not(*args)
                case And():
                    return sympy.And(*args)
                case Or():
                    return sympy.Or(*args)
                case Implies():
                    return sympy.Implies(*args)
                case _:
                    assert False, type(f)

        return self.fold(lambda atom: sympy.Symbol(atom.name), combine)


# The following imports are intentionally late to avoid circularity.
from .atomic import Atom
from .boolean import And, Implies, Not, Or
