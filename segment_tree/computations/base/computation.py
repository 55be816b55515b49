import typing as T
from abc import ABC, abstractmethod

T_in = T.TypeVar("T_in")
T_out = T.TypeVar("T_out")


class SegmentTreeComputation(T.Generic[T_in, T_out], ABC):
    """Aggregation policy a segment tree is generic over.

    Implementations are stateless. `combine` receives the aggregates of two
    adjacent ranges, left before right, and must be associative. It does not
    need to be commutative, so operands must never be swapped.
    """

    @abstractmethod
    def init(self, value: T_in) -> T_out:
        """Lifts a single element into the aggregate domain."""
        raise NotImplementedError()

    @abstractmethod
    def combine(self, left_result: T_out, right_result: T_out) -> T_out:
        """Merges the aggregates of two adjacent ranges into the aggregate of their union."""
        raise NotImplementedError()

    @abstractmethod
    def update(self, prev_value: T_out, new_value: T_in) -> T_out:
        """Aggregate of a leaf whose element is overwritten with `new_value`."""
        raise NotImplementedError()

    def answer(self, result: T_out) -> T.Any:
        """Scalar answer of an aggregate."""
        return result

    def __repr__(self):
        return f"{type(self).__name__}()"
