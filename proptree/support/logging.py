import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Allows to log the time relative to a reference time by adding an
    attribute `delta` to the :class:`.logging.LogRecord`. The
    :class:`.pipeline.Pipeline` resets the reference time at the beginning of
    each run, so that log lines show the time spent within that run.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> time.sleep(0.01)
    >>> logger.warning('converting to CNF')  # doctest: +SKIP
    0:00:00.012: converting to CNF
    """

    _time_since_start_time = time.time() - logging._startTime  # type: ignore

    def format(self, record: logging.LogRecord) -> str:
        timestamp = record.relativeCreated / 1000 - self._time_since_start_time
        delta = datetime.timedelta(seconds=timestamp)
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self._time_since_start_time + logging._startTime  # type: ignore

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self._time_since_start_time = reference_time - logging._startTime  # type: ignore


def create_logger(name: str) -> tuple[logging.Logger, DeltaTimeFormatter]:
    """Create a module logger that does not propagate to the root logger.
    The logger writes to its own stream handler via a
    :class:`DeltaTimeFormatter`, which is returned along with the logger.

    >>> logger, formatter = create_logger('proptree.demo')
    >>> logger.propagate
    False
    >>> logger.getEffectiveLevel() == logging.WARNING
    True
    """
    delta_time_formatter = DeltaTimeFormatter(
        '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(delta_time_formatter)
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.addHandler(stream_handler)
    logger.addFilter(lambda record: str(record.msg).strip() != '')
    logger.setLevel(logging.WARNING)
    return logger, delta_time_formatter


class Timer:
    """A simple timer measuring the wall time in seconds relative to the last
    :meth:`.reset`. Instances of the Timer are implicitly reset when they are
    created.

    >>> import time
    >>> timer = Timer()
    >>> time.sleep(0.01)
    >>> timer.get() > 0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()
