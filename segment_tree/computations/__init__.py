from .base.computation import SegmentTreeComputation
from .sum_computation import SumComputation
from .max_computation import MaxComputation
from .min_computation import MinComputation
from .max_slice_sum_computation import MaxSliceSum, MaxSliceSumComputation
