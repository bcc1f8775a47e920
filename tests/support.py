import itertools

from proptree import Formula


def assignments(names):
    for values in itertools.product((False, True), repeat=len(names)):
        yield dict(zip(names, values))


def equivalent(f: Formula, g: Formula) -> bool:
    names = sorted(set(f.atom_names()) | set(g.atom_names()))
    return all(f.evaluate(a) == g.evaluate(a) for a in assignments(names))
