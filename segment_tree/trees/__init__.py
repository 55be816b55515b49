import typing as T
from .base.segment_tree import SegmentTree
from .sum_segment_tree import SumSegmentTree
from .max_segment_tree import MaxSegmentTree
from .min_segment_tree import MinSegmentTree
from .max_slice_sum_segment_tree import MaxSliceSumSegmentTree

AnySegmentTree = T.Union[SumSegmentTree, MaxSegmentTree, MinSegmentTree, MaxSliceSumSegmentTree]
