"""Command line driver: ``python -m proptree``.

The formula is taken from the command line, from a DIMACS CNF file given with
``--dimacs``, or else from one line of standard input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from .dimacs import DimacsError, read_dimacs
from .formulas import MissingVariableError
from .parser import ParserError
from .pipeline import Pipeline, Report
from .support.excepthook import NoTraceException


def parse_assignment(items: Sequence[str]) -> dict[str, bool]:
    """Convert arguments ``NAME=0`` or ``NAME=1`` into an assignment.

    >>> parse_assignment(['p=1', 'x_2=0'])
    {'p': True, 'x_2': False}
    >>> parse_assignment(['p=yes'])
    Traceback (most recent call last):
    ...
    proptree.support.excepthook.NoTraceException: invalid assignment 'p=yes': expecting NAME=0 or NAME=1
    """
    assignment = {}
    for item in items:
        name, sep, value = item.partition('=')
        if not sep or not name or value not in ('0', '1'):
            raise NoTraceException(f'invalid assignment {item!r}: expecting NAME=0 or NAME=1')
        assignment[name.strip()] = value == '1'
    return assignment


def print_report(report: Report, out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout

    def section(title: str) -> None:
        print(f'\n--- {title} ---', file=out)

    section('Prefix Conversion')
    print(f'Infix: {report.formula}', file=out)
    print(f'Prefix: {" ".join(report.prefix)}', file=out)
    section('Parse Tree Building')
    print('Parse tree built successfully!', file=out)
    section('Tree to Infix Conversion')
    print(f'In-order (infix form): {report.infix}', file=out)
    section('Tree Height')
    print(f'Tree height: {report.height}', file=out)
    section('Formula Evaluation')
    if report.value is None:
        print('No variables assigned. Skipping evaluation.', file=out)
    else:
        print(f'The formula evaluates to {"TRUE" if report.value else "FALSE"}.', file=out)
    if report.truth_table is not None:
        section('Truth Table')
        print(report.truth_table.format(), file=out)
    section('CNF Conversion and Clause Validity')
    print(f'CNF form of formula: {report.cnf_infix}', file=out)
    validity = report.validity
    print(f'Valid (tautological) clauses: {validity.tautology_count}', file=out)
    print(f'Non-tautological clauses: {validity.non_tautology_count}', file=out)
    if validity.is_tautology:
        print('The CNF is valid (all clauses are tautologies).', file=out)
    else:
        print('The CNF is not valid (some clauses are not tautologies).', file=out)


def argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='proptree',
        description='Analyze a propositional formula written with the operators '
                    '~ (not), * (and), + (or), > (implies).')
    parser.add_argument('formula', nargs='?', help='formula in infix notation')
    parser.add_argument('--dimacs', metavar='FILE', help='read the formula from a DIMACS CNF file')
    parser.add_argument('--assign', metavar='NAME=0|1', action='append', default=[],
                        help='truth value of an atom, can be repeated')
    parser.add_argument('--truth-table', action='store_true', help='print the truth table')
    parser.add_argument('--truth-table-limit', type=int, default=16, metavar='N',
                        help='maximal number of atoms for the truth table (default: %(default)s)')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    return parser


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> None:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    args = argument_parser().parse_args(argv)
    if args.formula and args.dimacs:
        raise NoTraceException('give either a formula or a DIMACS file, not both')
    if args.dimacs:
        try:
            formula = read_dimacs(args.dimacs)
        except (OSError, DimacsError) as exc:
            raise NoTraceException(f'cannot read DIMACS file: {exc}') from None
        print(f'Formula from CNF: {formula}', file=stdout)
    elif args.formula:
        formula = args.formula
    else:
        stdout.write('Enter the infix logical expression: ')
        stdout.flush()
        formula = stdin.readline().strip()
    if not formula:
        raise NoTraceException('no formula given')
    assignment = parse_assignment(args.assign) if args.assign else None
    try:
        report = Pipeline()(formula, assignment,
                            log_level=getattr(logging, args.log_level),
                            truth_table=args.truth_table,
                            truth_table_limit=args.truth_table_limit)
    except ParserError:
        raise NoTraceException('Tree could not be built! Check the input expression.') from None
    except MissingVariableError as exc:
        raise NoTraceException(f'cannot evaluate: {exc}') from None
    except ValueError as exc:
        raise NoTraceException(str(exc)) from None
    print_report(report, out=stdout)


if __name__ == '__main__':
    main()
