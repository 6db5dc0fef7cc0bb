import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Optional

from intervalstore.store.AssignResult import AssignErrorKind
from intervalstore.store.IntervalStore import IntervalStore
from intervalstore.stress.StressOptions import StressOptions

logger = logging.getLogger(__name__)


@dataclass
class StressReport:
    iterations: int = 0
    applied: int = 0
    failed: int = 0
    empty: int = 0
    boundaries: int = 0
    failures_by_kind: Dict[AssignErrorKind, int] = field(default_factory=dict)


class StressDriver:
    """
    Applies random assignments to an IntervalStore[int, str] and checks the post-conditions
    of every round. A broken post-condition raises an AssertionError, failed assignments
    are counted and skipped.
    """

    def __init__(self, options: Optional[StressOptions] = None):
        self.options = options if options is not None else StressOptions()
        self.rng = random.Random(self.options.seed)

        self.store: IntervalStore[int, str] = IntervalStore(self._random_value())
        self.report = StressReport()
        self._failures: Counter = Counter()

        logger.debug(f"Stress driver started with base value {self.store.base_value!r}.")

    def _random_value(self) -> str:
        return chr(self.rng.randint(ord(self.options.min_value), ord(self.options.max_value)))

    def _random_key(self) -> int:
        return self.rng.randint(self.options.min_key, self.options.max_key)

    def step(self) -> bool:
        """
        Run a single round.

        :return: True if the assignment of this round succeeded.
        """
        begin = self._random_key()
        end = self._random_key()
        value = self._random_value()

        begin_value = self.store.lookup(begin)
        end_value = self.store.lookup(end)
        snapshot = list(self.store.entries())

        result = self.store.assign(begin, end, value)
        self.report.iterations += 1

        if not result.ok:
            self._failures[result.kind] += 1
            self.report.failed += 1
            self.report.failures_by_kind = dict(self._failures)
            logger.debug(f"Round {self.report.iterations}: [{begin}, {end}) = {value!r} failed: {result.error}")
            assert list(self.store.entries()) == snapshot, "Failed assignment modified the store."
            return False

        assert self.store.lookup(end) == end_value, \
            f"Value at end {end} changed from {end_value!r} to {self.store.lookup(end)!r}."

        if begin < end:
            assert self.store.lookup(begin) == value, \
                f"Value at begin {begin} is {self.store.lookup(begin)!r} instead of {value!r}."
            self.report.applied += 1
        else:
            assert self.store.lookup(begin) == begin_value, f"Empty range [{begin}, {end}) modified the store."
            self.report.empty += 1

        assert self.store.is_canonical(), f"Store is not canonical after [{begin}, {end}) = {value!r}."

        self.report.boundaries = len(self.store)
        return True

    def run(self, wrap_rounds: Optional[Callable[[Iterable[int]], Iterable[int]]] = None) -> StressReport:
        """
        Run all rounds and log a summary.

        :param wrap_rounds: Optional wrapper around the round iterable, e.g. a progress bar.
        :return: The report of all rounds run by this driver.
        """
        rounds: Iterable[int] = range(self.options.iterations)
        if wrap_rounds is not None:
            rounds = wrap_rounds(rounds)

        for _ in rounds:
            self.step()

        logger.info(f"Stress run done: {self.report.applied} applied, {self.report.failed} failed, "
                    f"{self.report.empty} empty, {self.report.boundaries} boundaries.")
        return self.report
