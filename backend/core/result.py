"""
Outcome types for operations that degrade instead of failing.

Ok carries the normal result. Degraded carries fallback data together with
a short cause code and the exception that triggered it, so callers and tests
can tell the fallback path apart without inspecting logs.

Dependencies: dataclasses
System role: Result type shared by chunking, ingestion and retrieval
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Operation completed on its primary path."""

    data: T

    @property
    def is_degraded(self) -> bool:
        return False

    @property
    def cause(self) -> None:
        return None


@dataclass(frozen=True)
class Degraded(Generic[T]):
    """
    Operation fell back to a reduced result.

    Attributes:
        data: Fallback payload (still usable by the caller)
        cause: Machine-readable reason, e.g. "store_error" or "no_match"
        error: Exception that triggered the fallback, if any
    """

    data: T
    cause: str
    error: BaseException | None = None

    @property
    def is_degraded(self) -> bool:
        return True


Result = Union[Ok[T], Degraded[T]]
