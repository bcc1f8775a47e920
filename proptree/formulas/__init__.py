r"""Expression trees of propositional formulas.

An abstract base class :class:`Formula` implements representations of and
methods on propositional formulas recursively built from atoms using Boolean
operators. Atoms are the leaves of the tree and are implemented by the class
:class:`Atom`. Operators are mapped to classes as follows:

+---------------+---------------+--------------+-------------------------+
| :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\longrightarrow` |
+---------------+---------------+--------------+-------------------------+
| :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Implies`        |
+---------------+---------------+--------------+-------------------------+
| ``~``         | ``*``         | ``+``        | ``>``                   |
+---------------+---------------+--------------+-------------------------+

The last row lists the tokens used in infix and prefix notation.

>>> p, q, r = Atom('p'), Atom('q'), Atom('r')
>>> f = Implies(p, And(q, Not(r)))
>>> f
Implies(Atom('p'), And(Atom('q'), Not(Atom('r'))))
>>> print(f)
(p > (q * (~r)))
>>> f.to_prefix()
['>', 'p', '*', 'q', '~', 'r']
>>> f.height()
4
>>> f.evaluate({'p': True, 'q': True, 'r': False})
True
>>> print(f.to_cnf())
(((~p) + q) * ((~p) + (~r)))
"""

from .formula import Formula, MissingVariableError  # noqa

from .atomic import Atom  # noqa

from .boolean import BooleanFormula, BinaryFormula, Implies, And, Or, Not, OPERATORS  # noqa


__all__ = [
    'Formula', 'MissingVariableError',

    'Atom',

    'BooleanFormula', 'BinaryFormula', 'Implies', 'And', 'Or', 'Not', 'OPERATORS'
]
