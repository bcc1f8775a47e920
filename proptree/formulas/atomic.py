"""Atoms are the leaves of expression trees. An atom is identified by its
name, which is a :external:class:`str`. Names produced by the tokenizer consist
of letters, digits, and underscores, and start with a letter or a digit.
"""

from __future__ import annotations

import re
from typing import Final, final

from .formula import Formula


@final
class Atom(Formula):
    """A propositional atom.

    >>> Atom('x1')
    Atom('x1')
    >>> print(Atom('x1'))
    x1
    >>> Atom('x1') == Atom('x1')
    True
    """

    NAME: Final = re.compile(r'[A-Za-z0-9][A-Za-z0-9_]*')
    """The shape of atom names produced by :func:`.parser.tokenize`.
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        if not isinstance(name, str) or not name:
            raise ValueError(f'{name!r} is not a valid atom name')
        self.args = (name, )

    def __repr__(self) -> str:
        return f'{self.op.__name__}({self.name!r})'

    @property
    def name(self) -> str:
        """The name of the atom.
        """
        return self.args[0]
