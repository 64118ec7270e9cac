"""
Wall-clock timing for backend calls.

The backend wraps each test body in a named section so that a result can
report how long the statistic took, which matters for the exact
enumeration branches of the rank tests.
"""

import time
from collections import defaultdict
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Records a total duration plus any number of named sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('wilcox_rank_sum'):
            params, warnings_list = mann_whitney_u(design)
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'wilcox_rank_sum': ...}
    """

    def __init__(self):
        self._began: float | None = None
        self._elapsed: float | None = None
        self._sections: defaultdict[str, float] = defaultdict(float)

    def start(self) -> None:
        self._began = time.perf_counter()

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent inside the block to section `name`.

        Re-entering a section accumulates; a section is recorded even when
        its block raises.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] += time.perf_counter() - began

    def result(self) -> dict[str, float]:
        """
        Section durations keyed by name, plus 'total_seconds'.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block with a started Timer that is stopped on exit.

    Usage:
        with timed() as timer:
            adjusted = p_adjust(p_values, method="BH")
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
