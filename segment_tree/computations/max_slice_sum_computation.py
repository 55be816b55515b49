import typing as T
from dataclasses import dataclass

import numpy as np

from .base.computation import SegmentTreeComputation

T_num = T.TypeVar("T_num")


def _scalar(value):
    return value.item() if isinstance(value, np.generic) else value


@dataclass(frozen=True)
class MaxSliceSum(T.Generic[T_num]):
    """Summary of a non-empty range that is enough to merge two adjacent ranges
    without looking at their elements again.

    Attributes:
        total_sum: sum of the whole range.
        best_sum: biggest sum of a non-empty contiguous slice of the range.
        best_prefix: biggest sum of a non-empty prefix of the range.
        best_suffix: biggest sum of a non-empty suffix of the range.
    """
    total_sum: T_num
    best_sum: T_num
    best_prefix: T_num
    best_suffix: T_num

    @classmethod
    def from_value(cls, value: T_num) -> "MaxSliceSum[T_num]":
        return cls(total_sum=value, best_sum=value, best_prefix=value, best_suffix=value)

    @classmethod
    def from_slice(cls, values: T.Iterable[T_num]) -> "MaxSliceSum[T_num]":
        """Computes the summary of `values` directly, in linear time."""
        arr = np.asarray(list(values))
        if arr.ndim != 1 or len(arr) == 0:
            raise ValueError("values must be a non-empty flat sequence")

        prefix_sums = np.concatenate([np.zeros(1, dtype=arr.dtype), np.cumsum(arr)])
        total_sum = prefix_sums[-1]
        # a slice [i, j) sums to prefix_sums[j] - prefix_sums[i], with i < j
        lowest_before = np.minimum.accumulate(prefix_sums[:-1])
        best_sum = np.max(prefix_sums[1:] - lowest_before)
        best_prefix = np.max(prefix_sums[1:])
        best_suffix = total_sum - np.min(prefix_sums[:-1])

        return cls(
            total_sum=_scalar(total_sum),
            best_sum=_scalar(best_sum),
            best_prefix=_scalar(best_prefix),
            best_suffix=_scalar(best_suffix),
        )

    @property
    def answer(self) -> T_num:
        return self.best_sum


class MaxSliceSumComputation(SegmentTreeComputation[T_num, MaxSliceSum[T_num]]):
    def init(self, value: T_num) -> MaxSliceSum[T_num]:
        return MaxSliceSum.from_value(value)

    def combine(self, left_result: MaxSliceSum[T_num], right_result: MaxSliceSum[T_num]) -> MaxSliceSum[T_num]:
        total_sum = left_result.total_sum + right_result.total_sum
        best_prefix = max(left_result.best_prefix, left_result.total_sum + right_result.best_prefix)
        best_suffix = max(right_result.best_suffix, right_result.total_sum + left_result.best_suffix)
        best_sum = max(
            best_prefix,
            best_suffix,
            total_sum,
            left_result.best_sum,
            right_result.best_sum,
            # slice crossing the boundary between both halves
            left_result.best_suffix + right_result.best_prefix,
        )
        return MaxSliceSum(
            total_sum=total_sum,
            best_sum=best_sum,
            best_prefix=best_prefix,
            best_suffix=best_suffix,
        )

    def update(self, prev_value: MaxSliceSum[T_num], new_value: T_num) -> MaxSliceSum[T_num]:
        return self.init(new_value)

    def answer(self, result: MaxSliceSum[T_num]) -> T_num:
        return result.answer
