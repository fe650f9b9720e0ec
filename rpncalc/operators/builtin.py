"""
Built-in operator set.

Arithmetic runs on numpy float64 with floating point warnings silenced, so
domain errors produce IEEE results (NaN, +/-Inf) instead of exceptions. The
only operator that fails outright is division by exactly zero.
"""

import math
from typing import Callable, Dict

import numpy as np

from ..errors import DivisionByZeroError
from .registry import Fixity, OperatorDescriptor, OperatorRegistry, Precedence, operator

_BUILTINS: Dict[str, OperatorDescriptor] = {}


def _ieee(ufunc: Callable, *operands: float) -> float:
    with np.errstate(all="ignore"):
        return float(ufunc(*(np.float64(x) for x in operands)))


@operator(_BUILTINS, "+", fixity=Fixity.INFIX, precedence=Precedence.NORMAL)
def add(left: float, right: float) -> float:
    """Addition."""
    return _ieee(np.add, left, right)


@operator(_BUILTINS, "-", fixity=Fixity.INFIX, precedence=Precedence.NORMAL)
def subtract(left: float, right: float) -> float:
    """Subtraction."""
    return _ieee(np.subtract, left, right)


@operator(_BUILTINS, "*", fixity=Fixity.INFIX, precedence=Precedence.MIDDLE)
def multiply(left: float, right: float) -> float:
    """Multiplication."""
    return _ieee(np.multiply, left, right)


@operator(_BUILTINS, "/", fixity=Fixity.INFIX, precedence=Precedence.MIDDLE)
def divide(left: float, right: float) -> float:
    """Division; a zero divisor is an error."""
    if right == 0:
        raise DivisionByZeroError("division by zero")
    return _ieee(np.divide, left, right)


@operator(_BUILTINS, "%", fixity=Fixity.INFIX, precedence=Precedence.MIDDLE)
def remainder(left: float, right: float) -> float:
    """Floating point remainder, sign follows the dividend."""
    return _ieee(np.fmod, left, right)


@operator(_BUILTINS, "^", fixity=Fixity.INFIX, precedence=Precedence.HIGH)
def power(left: float, right: float) -> float:
    """Exponentiation."""
    return _ieee(np.power, left, right)


@operator(_BUILTINS, "!", fixity=Fixity.SUFFIX, precedence=Precedence.HIGH)
def factorial(left: float, right: float) -> float:
    """Factorial of the operand truncated toward zero; 1 for n <= 0."""
    if math.isnan(left):
        return math.nan
    if math.isinf(left):
        return math.inf if left > 0 else 1.0
    result = 1.0
    for i in range(2, int(left) + 1):
        result *= i
        if math.isinf(result):
            break
    return result


@operator(_BUILTINS, "sqrt", fixity=Fixity.FUNCTION, precedence=Precedence.HIGH)
def square_root(left: float, right: float) -> float:
    """Square root."""
    return _ieee(np.sqrt, left)


@operator(_BUILTINS, "log", fixity=Fixity.FUNCTION, precedence=Precedence.HIGH)
def natural_log(left: float, right: float) -> float:
    """Natural logarithm."""
    return _ieee(np.log, left)


@operator(_BUILTINS, "sin", fixity=Fixity.FUNCTION, precedence=Precedence.HIGH)
def sine(left: float, right: float) -> float:
    """Sine, radians."""
    return _ieee(np.sin, left)


@operator(_BUILTINS, "cos", fixity=Fixity.FUNCTION, precedence=Precedence.HIGH)
def cosine(left: float, right: float) -> float:
    """Cosine, radians."""
    return _ieee(np.cos, left)


@operator(_BUILTINS, "tan", fixity=Fixity.FUNCTION, precedence=Precedence.HIGH)
def tangent(left: float, right: float) -> float:
    """Tangent, radians."""
    return _ieee(np.tan, left)


DEFAULT_REGISTRY = OperatorRegistry(_BUILTINS.values())


def default_registry() -> OperatorRegistry:
    """Registry with + - * / % ^ ! sqrt log sin cos tan."""
    return DEFAULT_REGISTRY
