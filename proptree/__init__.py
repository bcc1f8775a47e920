__version__ = '0.1'

from . import formulas

from .formulas import (Formula, Atom, BooleanFormula, Implies, And, Or, Not,  # noqa
                       MissingVariableError)

from .parser import tokenize, infix_to_prefix, build_tree, parse, ParserError  # noqa

from .queries import to_infix, tree_height, collect_atoms, evaluate  # noqa

from .truthtable import truth_table, TruthTable, Row  # noqa

from .cnf import (ConjunctiveNormalForm, eliminate_implications,  # noqa
                  move_negations, distribute_or_over_and, to_cnf)

from .clauses import (get_literals, collect_clauses, is_tautological_clause,  # noqa
                      analyze_cnf_validity, CnfValidity)

from .dimacs import dimacs_to_formula, read_dimacs, DimacsError  # noqa

from .pipeline import Pipeline, Options, Report  # noqa

__all__ = formulas.__all__ + [
    'tokenize', 'infix_to_prefix', 'build_tree', 'parse', 'ParserError',

    'to_infix', 'tree_height', 'collect_atoms', 'evaluate',

    'truth_table', 'TruthTable', 'Row',

    'ConjunctiveNormalForm', 'eliminate_implications', 'move_negations',
    'distribute_or_over_and', 'to_cnf',

    'get_literals', 'collect_clauses', 'is_tautological_clause',
    'analyze_cnf_validity', 'CnfValidity',

    'dimacs_to_formula', 'read_dimacs', 'DimacsError',

    'Pipeline', 'Options', 'Report'
]
