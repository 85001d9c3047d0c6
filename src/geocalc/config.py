import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class CalculationConfig:
    """Numeric constants shared by the coordinate calculations."""

    earth_radius: float = 6372797.560856
    epsilon: float = sys.float_info.epsilon
    coordinate_precision: float = 1e6
    regression_offset: float = 0.00001
    parallel_slope_threshold: float = 0.1
    max_circle_reorderings: int = 3
    atan_table_size: int = 4096


DEFAULT_CONFIG = CalculationConfig()
