"""Truth tables of propositional formulas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional

from .formulas import Formula


class Row(NamedTuple):
    """One row of a :class:`TruthTable`. The `values` are aligned with
    :attr:`TruthTable.atoms`.
    """
    values: tuple[bool, ...]
    result: bool


@dataclass(frozen=True)
class TruthTable:
    """The truth table of a formula. The columns are the atoms in ascending
    order. Row number `i` assigns to the atom in column `j` the bit number
    ``n - 1 - j`` of `i`, where `n` is the number of atoms. In other words,
    the first atom is the most significant bit.

    >>> from proptree.parser import parse
    >>> table = truth_table(parse('p > q'))
    >>> table.atoms
    ('p', 'q')
    >>> for row in table.rows:
    ...     print(row)
    Row(values=(False, False), result=True)
    Row(values=(False, True), result=True)
    Row(values=(True, False), result=False)
    Row(values=(True, True), result=True)
    """

    atoms: tuple[str, ...]
    rows: tuple[Row, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def assignments(self) -> Iterator[dict[str, bool]]:
        """The assignments of all rows in order.

        >>> from proptree.parser import parse
        >>> list(truth_table(parse('~a')).assignments())
        [{'a': False}, {'a': True}]
        """
        for row in self.rows:
            yield dict(zip(self.atoms, row.values))

    def format(self) -> str:
        """A plain text rendering with one column of width 6 for each atom,
        followed by a column ``Result``. Truth values are printed as ``0`` and
        ``1``.

        >>> from proptree.parser import parse
        >>> print(truth_table(parse('p * q')).format())
             p     q    Result
        ----------------------
             0     0         0
             0     1         0
             1     0         0
             1     1         1
        """
        lines = [''.join(f'{atom:>6}' for atom in self.atoms) + f'{"Result":>10}',
                 '-' * (6 * len(self.atoms) + 10)]
        for values, result in self.rows:
            lines.append(''.join(f'{int(value):>6}' for value in values)
                         + f'{int(result):>10}')
        return '\n'.join(lines)


def truth_table(tree: Optional[Formula]) -> TruthTable:
    """Evaluate `tree` under all assignments to its atoms.

    >>> from proptree.parser import parse
    >>> len(truth_table(parse('(a + b) * (c > a)')))
    8
    >>> truth_table(None)
    Traceback (most recent call last):
    ...
    ValueError: parse tree is empty
    """
    if tree is None:
        raise ValueError('parse tree is empty')
    atoms = tuple(tree.atom_names())
    n = len(atoms)
    rows = []
    for i in range(2 ** n):
        values = tuple(bool((i >> (n - j - 1)) & 1) for j in range(n))
        result = tree.evaluate(dict(zip(atoms, values)))
        rows.append(Row(values, result))
    return TruthTable(atoms, tuple(rows))
