"""This module :mod:`proptree.pipeline` runs the complete analysis of a formula
in infix notation: conversion to prefix notation, construction of the
expression tree, infix rendering, height, evaluation, truth table, CNF, and the
clause-level tautology test. The results are collected in a :class:`Report`
for the caller to present.

>>> report = Pipeline()('p > q', {'p': True, 'q': False}, truth_table=True)
>>> report.prefix
['>', 'p', 'q']
>>> report.infix, report.height, report.value
('(p > q)', 2, False)
>>> len(report.truth_table)
4
>>> report.cnf_infix, report.clauses
('((~p) + q)', [['~p', 'q']])
>>> report.validity
CnfValidity(is_tautology=False, tautology_count=0, non_tautology_count=1)
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Mapping, Optional

from .clauses import analyze_cnf_validity, collect_clauses, CnfValidity
from .cnf import ConjunctiveNormalForm
from .formulas import Formula
from .parser import build_tree, infix_to_prefix, ParserError
from .support.logging import create_logger, Timer
from .truthtable import truth_table, TruthTable

# Create logger. Loggers of all modules below proptree report via this one.
logger, delta_time_formatter = create_logger('proptree')


class Options:
    """This class holds options that can be provided as keyword arguments to
    :meth:`.Pipeline.__call__`.

    >>> Options(truth_table=True, truth_table_limit=4)
    Options(log_level=0, truth_table=True, truth_table_limit=4)
    >>> Options(truth_table_limit=-1)
    Traceback (most recent call last):
    ...
    ValueError: negative truth_table_limit
    """

    log_level: int
    """The `log_level` of the logger of the package during the run.
    :data:`logging.NOTSET` keeps the current level.
    """

    truth_table: bool
    """Compute the truth table.
    """

    truth_table_limit: int
    """The maximal number of atoms for which a requested truth table is
    computed. The truth table has ``2 ** n`` rows for `n` atoms.
    """

    def __init__(self, log_level: int = logging.NOTSET, truth_table: bool = False,
                 truth_table_limit: int = 16) -> None:
        if truth_table_limit < 0:
            raise ValueError('negative truth_table_limit')
        self.log_level = log_level
        self.truth_table = truth_table
        self.truth_table_limit = truth_table_limit

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}(log_level={self.log_level}, '
                f'truth_table={self.truth_table}, '
                f'truth_table_limit={self.truth_table_limit})')


@dataclass
class Report:
    """The results of one run of :class:`Pipeline`.
    """

    formula: str
    """The input in infix notation.
    """

    prefix: list[str]
    """The tokens in prefix notation.
    """

    tree: Formula
    infix: str
    height: int

    value: Optional[bool]
    """The value of the formula under the assignment, or :obj:`None` if no
    assignment has been given.
    """

    truth_table: Optional[TruthTable]
    """The truth table, or :obj:`None` if it has not been requested or the
    formula has too many atoms.
    """

    cnf: Formula
    cnf_infix: str
    clauses: list[list[str]]
    validity: CnfValidity

    time: float = field(default=0.0, compare=False)
    """The wall time of the run in seconds.
    """


@dataclass
class Pipeline:
    """A callable class that runs the analysis of one formula.
    """

    options: Optional[Options] = None
    """The options that have been passed to :meth:`.__call__`.
    """

    def __call__(self, formula: str, assignment: Optional[Mapping[str, bool]] = None,
                 **options) -> Report:
        """Analyze `formula`, which is in infix notation.

        :param assignment:
          A mapping from atom names to truth values, which must cover all atoms
          of `formula`. If it is :obj:`None`, evaluation is skipped.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`Options`.

        :raises ParserError:
          If no expression tree can be built from `formula`.

        :raises MissingVariableError:
          If `assignment` does not cover all atoms of `formula`.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        self.options = Options(**options)
        save_level = logger.getEffectiveLevel()
        try:
            if self.options.log_level != logging.NOTSET:
                logger.setLevel(self.options.log_level)
            logger.info(f'{self.options}')
            report = self.analyze(formula, assignment)
            logger.info('finished')
        finally:
            logger.setLevel(save_level)
        report.time = timer.get()
        return report

    def analyze(self, formula: str, assignment: Optional[Mapping[str, bool]]) -> Report:
        assert self.options is not None
        prefix = infix_to_prefix(formula)
        logger.info(f'prefix: {" ".join(prefix)}')
        tree = build_tree(prefix)
        if tree is None:
            raise ParserError(f'cannot build a tree from {formula!r}')
        logger.info('tree built')
        value = None
        if assignment is not None:
            value = tree.evaluate(assignment)
            logger.info(f'evaluated to {value}')
        table = None
        if self.options.truth_table:
            atoms = tree.atom_names()
            if len(atoms) > self.options.truth_table_limit:
                logger.warning(f'skipping truth table: {len(atoms)} atoms exceed '
                               f'the limit of {self.options.truth_table_limit}')
            else:
                table = truth_table(tree)
                logger.info(f'truth table with {len(table)} rows')
        cnf_converter = ConjunctiveNormalForm()
        cnf = cnf_converter(tree)
        logger.info(f'CNF computed, {cnf_converter.nodes_created} nodes created')
        clauses = collect_clauses(cnf)
        validity = analyze_cnf_validity(clauses)
        logger.info(f'{validity}')
        return Report(formula=formula, prefix=prefix, tree=tree, infix=tree.to_infix(),
                      height=tree.height(), value=value, truth_table=table, cnf=cnf,
                      cnf_infix=cnf.to_infix(), clauses=clauses, validity=validity)
