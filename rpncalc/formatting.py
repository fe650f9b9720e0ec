"""Display formatting for evaluation results."""

import math

import numpy as np


def format_result(value: float) -> str:
    """
    Shortest decimal string that round-trips to ``value``.

    Positional notation only, with trailing zeros and a trailing '.' removed:
    3.0 -> "3", 0.1 + 0.2 -> "0.30000000000000004", 1e21 -> "1000000000000000000000".
    Non-finite values print as "NaN", "+Inf" and "-Inf".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return np.format_float_positional(value, unique=True, trim="-")
