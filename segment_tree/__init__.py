from .errors import SegmentTreeError, OutOfBounds, InvalidRange, ProtocolError
from .computations import SegmentTreeComputation, SumComputation, MaxComputation, MinComputation, \
    MaxSliceSum, MaxSliceSumComputation
from .trees import SegmentTree, SumSegmentTree, MaxSegmentTree, MinSegmentTree, MaxSliceSumSegmentTree, \
    AnySegmentTree
from . import computations, trees
