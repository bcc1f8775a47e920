"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`. In contrast to atoms, these are the inner nodes of
expression trees. :class:`Not` has exactly one child, and :class:`And`,
:class:`Or`, :class:`Implies` have exactly two children. The constructors
neither flatten nor simplify, so that the tree produced by the parser reflects
the input exactly.
"""
from __future__ import annotations

from typing import ClassVar, final

from .formula import Formula


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\lnot`,
    :math:`\wedge`, :math:`\vee`, :math:`\longrightarrow`.
    """

    @staticmethod
    def _check_formulas(*args: object) -> None:
        for arg in args:
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')


class BinaryFormula(BooleanFormula):
    """A Boolean formula whose toplevel operator takes two arguments. The
    order of the arguments is significant for :class:`Implies`, and it is
    preserved for :class:`And` and :class:`Or` as well.

    >>> from proptree.formulas import Atom
    >>> Or(Atom('p'), 'q')
    Traceback (most recent call last):
    ...
    ValueError: 'q' is not a Formula
    """

    def __init__(self, lhs: Formula, rhs: Formula) -> None:
        super().__init__()
        self._check_formulas(lhs, rhs)
        self.args = (lhs, rhs)

    @property
    def lhs(self) -> Formula:
        """The left-hand side, i.e., the first child.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The right-hand side, i.e., the second child.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[1]


@final
class Implies(BinaryFormula):
    r"""A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator :math:`\longrightarrow`.
    Its token is ``>``.

    >>> from proptree.formulas import Atom
    >>> Implies(Atom('p'), Atom('q'))
    Implies(Atom('p'), Atom('q'))
    """

    SYMBOL: ClassVar[str] = '>'
    PRECEDENCE: ClassVar[int] = 0


@final
class Or(BinaryFormula):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\vee`. Its token
    is ``+``.

    >>> from proptree.formulas import Atom
    >>> Or(Atom('p'), Or(Atom('q'), Atom('r')))
    Or(Atom('p'), Or(Atom('q'), Atom('r')))
    """

    SYMBOL: ClassVar[str] = '+'
    PRECEDENCE: ClassVar[int] = 1

    @classmethod
    def dual(cls) -> type[And]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And


@final
class And(BinaryFormula):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\wedge`. Its token
    is ``*``.

    >>> from proptree.formulas import Atom
    >>> And(Atom('p'), Not(Atom('p')))
    And(Atom('p'), Not(Atom('p')))
    """

    SYMBOL: ClassVar[str] = '*'
    PRECEDENCE: ClassVar[int] = 2

    @classmethod
    def dual(cls) -> type[Or]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or


@final
class Not(BooleanFormula):
    r"""A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\neg`. Its token is
    ``~``.

    >>> from proptree.formulas import Atom
    >>> Not(Not(Atom('p')))
    Not(Not(Atom('p')))
    """

    SYMBOL: ClassVar[str] = '~'
    PRECEDENCE: ClassVar[int] = 3

    def __init__(self, arg: Formula) -> None:
        super().__init__()
        self._check_formulas(arg)
        self.args = (arg, )

    @property
    def arg(self) -> Formula:
        """The one argument of the operator :math:`\\neg`.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]


OPERATORS: dict[str, type[BooleanFormula]] = {
    op.SYMBOL: op for op in (Not, And, Or, Implies)}
"""Map operator tokens to the corresponding classes.

>>> OPERATORS['>']
<class 'proptree.formulas.boolean.Implies'>
"""
