import typing as T

from .base.computation import SegmentTreeComputation

T_ord = T.TypeVar("T_ord")


class MaxComputation(SegmentTreeComputation[T_ord, T_ord]):
    def init(self, value: T_ord) -> T_ord:
        return value

    def combine(self, left_result: T_ord, right_result: T_ord) -> T_ord:
        return max(left_result, right_result)

    def update(self, prev_value: T_ord, new_value: T_ord) -> T_ord:
        return new_value
