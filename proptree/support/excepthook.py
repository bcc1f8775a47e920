import sys
from typing import Optional
from types import TracebackType


class NoTraceException(Exception):
    """An exception that prints an error message and exits without a
    traceback. The command line driver raises it for situations that do not
    require inspection of the code, such as a formula from which no parse tree
    can be built, an assignment that misses a variable, or a malformed DIMACS
    file. Those are considered normal situations during command line use. The
    exception comes with a short but informative error message for the user.

    >>> handler(NoTraceException('tree could not be built'), None, stream=sys.stdout)
    proptree: tree could not be built
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType], stream=None) -> None:
    if stream is None:
        stream = sys.stderr
    print(f'proptree: {exc.args[0]}', file=stream, flush=True)


def excepthook(exc_type: type[BaseException], exc: BaseException, tb: Optional[TracebackType]):
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook
