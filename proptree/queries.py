"""Read-only queries on expression trees. These functions accept :obj:`None`
for the empty tree, which is what :func:`.parser.build_tree` returns when it
fails, and otherwise delegate to the corresponding methods of
:class:`.Formula`.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .formulas import Formula


def to_infix(tree: Optional[Formula]) -> str:
    """
    >>> from proptree.parser import parse
    >>> to_infix(parse('p > q * r'))
    '(p > (q * r))'
    >>> to_infix(None)
    ''
    """
    if tree is None:
        return ''
    return tree.to_infix()


def tree_height(tree: Optional[Formula]) -> int:
    """
    >>> from proptree.parser import parse
    >>> tree_height(parse('p')), tree_height(parse('~~p + q')), tree_height(None)
    (1, 4, 0)
    """
    if tree is None:
        return 0
    return tree.height()


def collect_atoms(tree: Optional[Formula]) -> list[str]:
    """
    >>> from proptree.parser import parse
    >>> collect_atoms(parse('(y + x) * ~y > x10'))
    ['x', 'x10', 'y']
    >>> collect_atoms(None)
    []
    """
    if tree is None:
        return []
    return tree.atom_names()


def evaluate(tree: Formula, assignment: Mapping[str, bool]) -> bool:
    """
    >>> from proptree.parser import parse
    >>> evaluate(parse('p > q'), {'p': True, 'q': True})
    True
    """
    return tree.evaluate(assignment)
