import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator
