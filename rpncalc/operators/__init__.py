"""
Operator registry and the built-in operator set.
"""

from .registry import (
    Fixity,
    OperatorDescriptor,
    OperatorFunction,
    OperatorRegistry,
    Precedence,
    operator,
)
from .builtin import DEFAULT_REGISTRY, default_registry

__all__ = [
    "Fixity",
    "OperatorDescriptor",
    "OperatorFunction",
    "OperatorRegistry",
    "Precedence",
    "operator",
    "DEFAULT_REGISTRY",
    "default_registry",
]
