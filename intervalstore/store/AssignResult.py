from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AssignErrorKind(Enum):
    PrecedingInputInvariantViolation = 0
    RedundantBaseAssignment = 1


class IntervalStoreError(Exception):
    kind: AssignErrorKind


class PrecedingInputInvariantViolation(IntervalStoreError):
    """
    The store was not in canonical form before the assignment started.
    """
    kind = AssignErrorKind.PrecedingInputInvariantViolation


class RedundantBaseAssignment(IntervalStoreError):
    """
    The first entry of an empty store would restate the base value.
    """
    kind = AssignErrorKind.RedundantBaseAssignment


@dataclass(frozen=True)
class AssignResult:
    """
    Outcome of an assignment. A failed result always means the store was left unmodified.
    """
    error: Optional[IntervalStoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[AssignErrorKind]:
        return None if self.error is None else self.error.kind

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.ok

    @staticmethod
    def success() -> "AssignResult":
        return AssignResult()

    @staticmethod
    def failure(error: IntervalStoreError) -> "AssignResult":
        return AssignResult(error=error)
