import typing as T

from .base.segment_tree import SegmentTree
from ..computations import SumComputation

T_num = T.TypeVar("T_num")


class SumSegmentTree(SegmentTree[T_num, T_num]):
    def __init__(self, sequence: T.Iterable[T_num]):
        super(SumSegmentTree, self).__init__(sequence, SumComputation())

    def sum(self, left: int, right: int) -> T_num:
        return super(SumSegmentTree, self).get(left, right)
