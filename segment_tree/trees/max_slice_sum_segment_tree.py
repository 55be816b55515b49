import typing as T

from .base.segment_tree import SegmentTree
from ..computations import MaxSliceSum, MaxSliceSumComputation

T_num = T.TypeVar("T_num")


class MaxSliceSumSegmentTree(SegmentTree[T_num, MaxSliceSum[T_num]]):
    def __init__(self, sequence: T.Iterable[T_num]):
        super(MaxSliceSumSegmentTree, self).__init__(sequence, MaxSliceSumComputation())

    def max_slice_sum(self, left: int, right: int) -> T_num:
        """Biggest sum of a non-empty contiguous slice inside [left, right]."""
        return super(MaxSliceSumSegmentTree, self).get(left, right).answer
