import typing as T

from .base.computation import SegmentTreeComputation

T_num = T.TypeVar("T_num")


class SumComputation(SegmentTreeComputation[T_num, T_num]):
    def init(self, value: T_num) -> T_num:
        return value

    def combine(self, left_result: T_num, right_result: T_num) -> T_num:
        return left_result + right_result

    def update(self, prev_value: T_num, new_value: T_num) -> T_num:
        return new_value
