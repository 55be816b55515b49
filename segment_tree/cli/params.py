from dataclasses import dataclass


@dataclass
class DriverParams:
    computation: str = "max_slice_sum"
    one_based: bool = True
