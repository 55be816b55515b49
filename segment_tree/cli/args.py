import argparse
import typing as T

from .params import DriverParams

COMPUTATION_CHOICES = ["sum", "max", "min", "max_slice_sum"]


class Args:
    def __init__(self, argv: T.Optional[T.List[str]] = None):
        parser = argparse.ArgumentParser(
            prog="segment-tree",
            description="answers point update and range queries read from stdin"
        )
        parser.add_argument("--computation", "-c", choices=COMPUTATION_CHOICES, default=DriverParams.computation,
                            help="aggregate computed over each queried range")
        parser.add_argument("--zero-based", action="store_true",
                            help="positions in queries start at 0 instead of 1")
        kargs = parser.parse_args(argv)
        self.computation: str = kargs.computation
        self.zero_based: bool = kargs.zero_based

    def driver_params(self) -> DriverParams:
        return DriverParams(computation=self.computation, one_based=not self.zero_based)


args = None


def get_args(argv: T.Optional[T.List[str]] = None) -> Args:
    global args
    if argv is not None:
        return Args(argv)
    if args is None:
        args = Args()
    return args
