"""Reading formulas from files in DIMACS CNF format.

Lines starting with ``c`` are comments, and the line starting with ``p`` is
the problem header. Every other line is one clause, given as signed integers
terminated by ``0``. A positive integer `k` denotes the atom ``xk``, and a
negative integer ``-k`` denotes its negation ``~xk``. The result is a formula
in the infix notation understood by :func:`.parser.parse`.

>>> text = '''c example
... p cnf 3 2
... 1 -2 0
... 2 3 -1 0
... '''
>>> dimacs_to_formula(text.splitlines())
'(x1 + ~x2) * (x2 + x3 + ~x1)'
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

logger = logging.getLogger(__name__)


class DimacsError(ValueError):
    pass


def literal_to_infix(literal: int) -> str:
    """
    >>> literal_to_infix(7), literal_to_infix(-12)
    ('x7', '~x12')
    """
    if literal < 0:
        return f'~x{-literal}'
    return f'x{literal}'


def dimacs_to_formula(lines: Iterable[str]) -> str:
    """Convert the lines of a DIMACS CNF file into a formula in infix
    notation. Clauses with no literals are skipped, and so is the ``%`` line
    that terminates the benchmark files of SATLIB.

    >>> dimacs_to_formula(['p cnf 1 1', '-1 0', '%', '0'])
    '(~x1)'
    >>> dimacs_to_formula(['1 two 0'])
    Traceback (most recent call last):
    ...
    proptree.dimacs.DimacsError: line 1: 'two' is not an integer
    """
    clauses = []
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line[0] in 'cp%':
            logger.debug(f'line {number}: skipping {line!r}')
            continue
        literals = []
        for word in line.split():
            try:
                literal = int(word)
            except ValueError:
                raise DimacsError(f'line {number}: {word!r} is not an integer') from None
            if literal == 0:
                break
            literals.append(literal_to_infix(literal))
        if not literals:
            logger.debug(f'line {number}: skipping empty clause')
            continue
        clauses.append('(' + ' + '.join(literals) + ')')
    logger.info(f'converted {len(clauses)} clauses')
    return ' * '.join(clauses)


def read_dimacs(path: str | os.PathLike[str]) -> str:
    """Read a DIMACS CNF file and convert it with :func:`dimacs_to_formula`.
    """
    with open(path, encoding='ascii', errors='replace') as file:
        return dimacs_to_formula(file)
