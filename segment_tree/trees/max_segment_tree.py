import typing as T

from .base.segment_tree import SegmentTree
from ..computations import MaxComputation

T_ord = T.TypeVar("T_ord")


class MaxSegmentTree(SegmentTree[T_ord, T_ord]):
    def __init__(self, sequence: T.Iterable[T_ord]):
        super(MaxSegmentTree, self).__init__(sequence, MaxComputation())

    def max(self, left: int, right: int) -> T_ord:
        return super(MaxSegmentTree, self).get(left, right)
