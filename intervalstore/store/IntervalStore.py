import logging
from typing import Generic, Iterator, Optional, Tuple, TypeVar, Union

from sortedcontainers import SortedDict

from intervalstore.store.AssignResult import AssignResult, PrecedingInputInvariantViolation, \
    RedundantBaseAssignment
from intervalstore.store.store_utils import find_canonical_violation

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')


class IntervalStore(Generic[K, V]):
    """
    A total mapping from an ordered key space to values which is constant over key ranges.

    Only the keys where the mapped value changes are stored. Every key below the first stored
    boundary maps to the base value. The boundaries are kept canonical: two consecutive
    boundaries never carry the same value and the first boundary never carries the base value.

    The store is not synchronized. Assignments have to be serialized by the owner and
    lookups must not run concurrently with an assignment.

    Attributes:
        _boundaries (SortedDict): Boundary key to the value which starts at this key.
    """

    def __init__(self, base_value: V) -> None:
        """
        Initialize a store which maps the whole key space to base_value.

        Args:
            base_value (V): Value of every key before the first boundary.
        """
        self._base_value = base_value
        self._boundaries: SortedDict[K, V] = SortedDict()

    @property
    def base_value(self) -> V:
        return self._base_value

    def lookup(self, key: K) -> V:
        """
        Retrieve the value which is active at key.

        Args:
            key (K): The key to look up.

        Returns:
            V: Value of the greatest boundary less or equal to key, or the base value.
        """
        index = self._boundaries.bisect_right(key) - 1
        if index < 0:
            return self._base_value
        return self._boundaries.values()[index]

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    def assign(self, begin: K, end: K, value: V) -> AssignResult:
        """
        Assign value to every key of the half-open range [begin, end).

        Keys outside the range keep their value. An empty range (not begin < end) is a no-op.
        The call is all-or-nothing: a failed result means nothing was modified.

        Args:
            begin (K): First key of the range (inclusive).
            end (K): End of the range (exclusive).
            value (V): The value to assign.

        Returns:
            AssignResult: Success, or the precondition which was violated.
        """
        if not (begin < end):
            return AssignResult.success()

        if len(self._boundaries) == 0 and value == self._base_value:
            logger.debug(f"Rejecting [{begin!r}, {end!r}) = {value!r}: restates base value of empty store.")
            return AssignResult.failure(RedundantBaseAssignment(
                f"First entry must not restate the base value {self._base_value!r}."))

        violation = self._find_violation_around(begin, end)
        if violation is not None:
            key, value_at_key = violation
            logger.debug(f"Rejecting [{begin!r}, {end!r}) = {value!r}: boundary {key!r} repeats {value_at_key!r}.")
            return AssignResult.failure(PrecedingInputInvariantViolation(
                f"Boundary {key!r} repeats the preceding value {value_at_key!r}."))

        # value continuing after the range, read before anything is removed
        tail_value = self.lookup(end)

        for key in list(self._boundaries.irange(begin, end, inclusive=(True, False))):
            del self._boundaries[key]

        if self._value_before(begin) != value:
            self._boundaries[begin] = value

        if tail_value != value:
            self._boundaries[end] = tail_value
        else:
            self._boundaries.pop(end, None)

        return AssignResult.success()

    def _value_before(self, key: K) -> V:
        index = self._boundaries.bisect_left(key) - 1
        if index < 0:
            return self._base_value
        return self._boundaries.values()[index]

    def _find_violation_around(self, begin: K, end: K) -> Optional[Tuple[K, V]]:
        """
        Check the canonical form of every boundary the merge decisions of an assignment read.

        The window reaches from the predecessor of the boundary before begin up to the
        successor of the first boundary at or after end.
        """
        start_index = max(self._boundaries.bisect_left(begin) - 2, -1)
        stop_index = min(self._boundaries.bisect_left(end) + 2, len(self._boundaries))

        if start_index < 0:
            previous = self._base_value
            start_index = 0
        else:
            previous = self._boundaries.values()[start_index]
            start_index += 1

        values = self._boundaries.values()[start_index:stop_index]
        index = find_canonical_violation(previous, values)
        if index is None:
            return None
        return self._boundaries.keys()[start_index + index], values[index]

    def is_canonical(self) -> bool:
        return find_canonical_violation(self._base_value, self._boundaries.values()) is None

    def entries(self) -> Iterator[Union[V, Tuple[K, V]]]:
        """
        Yield the base value followed by the (key, value) boundary pairs in key order.

        This is meant for display and diagnostics only.
        """
        yield self._base_value
        yield from self._boundaries.items()

    def __len__(self) -> int:
        return len(self._boundaries)

    def __repr__(self) -> str:
        return f"IntervalStore({self._base_value!r}, {dict(self._boundaries.items())!r})"
