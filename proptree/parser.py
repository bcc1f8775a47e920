"""This module :mod:`proptree.parser` turns formulas in infix notation into
expression trees. This happens in three steps:

1. :func:`tokenize` splits the input into atoms, operators, and parentheses.

2. :func:`infix_to_prefix` reorders the tokens into prefix (Polish) notation
   using operator precedence.

3. :func:`build_tree` assembles an expression tree from the prefix tokens.

The operators, from strongest to weakest binding, are ``~`` (NOT), ``*``
(AND), ``+`` (OR), and ``>`` (IMPLIES). AND and OR group to the left, IMPLIES
groups to the right:

>>> infix_to_prefix('p * q * r')
['*', '*', 'p', 'q', 'r']
>>> infix_to_prefix('p > q > r')
['>', 'p', '>', 'q', 'r']

The conversion processes the tokens from right to left. An operator on the
stack is popped when the incoming one binds weaker, and also when both are
IMPLIES. Popping on strictly weaker binding only would group IMPLIES to the
left as well, turning ``p > q > r`` into ``(p > q) > r``.

>>> print(parse('~p + q * r > s'))
(((~p) + (q * r)) > s)
"""

from __future__ import annotations

import logging
from typing import Final, Iterable, Optional

from .formulas import Atom, Formula, Implies, Not, OPERATORS

logger = logging.getLogger(__name__)

OPEN: Final = '('
CLOSE: Final = ')'
MIRROR: Final = {OPEN: CLOSE, CLOSE: OPEN}


class ParserError(Exception):
    pass


def tokenize(s: str) -> list[str]:
    """Split `s` into tokens. Whitespace is skipped. A maximal sequence of
    letters, digits, and underscores that starts with a letter or a digit is
    one atom. Every other character is a token of its own; this includes the
    operators and parentheses but also characters without any meaning, which
    are later ignored by :func:`infix_to_prefix`.

    >>> tokenize('(x1 + ~y_2)>z')
    ['(', 'x1', '+', '~', 'y_2', ')', '>', 'z']
    >>> tokenize('p & _q')
    ['p', '&', '_', 'q']
    """
    tokens = []
    pos = 0
    while pos < len(s):
        if s[pos].isspace():
            pos += 1
            continue
        match = Atom.NAME.match(s, pos)
        if match:
            tokens.append(match.group())
            pos = match.end()
        else:
            tokens.append(s[pos])
            pos += 1
    return tokens


def _is_atom_token(token: str) -> bool:
    return Atom.NAME.fullmatch(token) is not None


def _precedence(token: str) -> int:
    try:
        return OPERATORS[token].PRECEDENCE
    except KeyError:
        return -1


def _pops(top: str, token: str) -> bool:
    # The tokens are processed in reverse order. Popping on equal precedence
    # therefore makes the operator group to the right in the input.
    if top == OPEN:
        return False
    if _precedence(top) > _precedence(token):
        return True
    return token == Implies.SYMBOL and _precedence(top) == _precedence(token)


def infix_to_prefix(s: str | Iterable[str]) -> list[str]:
    """Convert a formula in infix notation into a list of tokens in prefix
    notation. `s` is either a string or a sequence of tokens as obtained
    from :func:`tokenize`.

    The token sequence is reversed with parentheses swapped, then processed
    with a shunting-yard algorithm, and the output is finally reversed again.

    >>> infix_to_prefix('p > q')
    ['>', 'p', 'q']
    >>> infix_to_prefix('~(p * q) + r')
    ['+', '~', '*', 'p', 'q', 'r']

    The conversion is lenient with malformed input. Unmatched parentheses and
    characters without meaning are dropped silently:

    >>> infix_to_prefix('(p + q')
    ['+', 'p', 'q']
    >>> infix_to_prefix('p + q)) & r')
    ['+', 'p', 'q', 'r']
    """
    tokens = tokenize(s) if isinstance(s, str) else list(s)
    ops: list[str] = []
    output: list[str] = []
    for token in reversed(tokens):
        token = MIRROR.get(token, token)
        if _is_atom_token(token):
            output.append(token)
        elif token == OPEN:
            ops.append(token)
        elif token == CLOSE:
            while ops and ops[-1] != OPEN:
                output.append(ops.pop())
            if ops:
                ops.pop()
            else:
                logger.debug(f'dropping unmatched {OPEN!r}')
        elif token in OPERATORS:
            while ops and _pops(ops[-1], token):
                output.append(ops.pop())
            ops.append(token)
        else:
            logger.debug(f'dropping unknown token {token!r}')
    while ops:
        top = ops.pop()
        if top == OPEN:
            logger.debug(f'dropping unmatched {CLOSE!r}')
            continue
        output.append(top)
    output.reverse()
    return output


def build_tree(prefix: Iterable[str]) -> Optional[Formula]:
    """Build an expression tree from a sequence of tokens in prefix notation.

    The tokens are scanned from right to left using a stack of subtrees. An
    operator takes its arguments from the stack, where the first one popped
    becomes the left child. Every token that is not an operator is an atom.

    >>> build_tree(['>', 'p', '~', 'q'])
    Implies(Atom('p'), Not(Atom('q')))

    If the tokens do not describe exactly one tree, the result is
    :obj:`None`:

    >>> build_tree(['*', 'p']) is None
    True
    >>> build_tree(['p', 'q']) is None
    True
    >>> build_tree([]) is None
    True
    """
    stack: list[Formula] = []
    for token in reversed(list(prefix)):
        op = OPERATORS.get(token)
        if op is Not:
            if not stack:
                logger.debug(f'missing argument for {token!r}')
                return None
            stack.append(Not(stack.pop()))
        elif op is not None:
            if len(stack) < 2:
                logger.debug(f'missing argument for {token!r}')
                return None
            lhs = stack.pop()
            rhs = stack.pop()
            stack.append(op(lhs, rhs))
        elif token:
            stack.append(Atom(token))
        else:
            logger.debug('empty token')
            return None
    if len(stack) != 1:
        logger.debug(f'{len(stack)} trees instead of one')
        return None
    return stack[0]


def parse(s: str) -> Formula:
    """Parse a formula in infix notation. This combines :func:`tokenize`,
    :func:`infix_to_prefix`, and :func:`build_tree`. In contrast to
    :func:`build_tree`, failure raises :exc:`ParserError`.

    >>> parse('p + ~p')
    Or(Atom('p'), Not(Atom('p')))
    >>> parse('p + * q')
    Traceback (most recent call last):
    ...
    proptree.parser.ParserError: cannot build a tree from 'p + * q' (prefix: + p * q)
    """
    prefix = infix_to_prefix(s)
    tree = build_tree(prefix)
    if tree is None:
        raise ParserError(f'cannot build a tree from {s!r} (prefix: {" ".join(prefix)})')
    return tree
