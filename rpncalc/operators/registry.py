# rpncalc/operators/registry.py
"""
Operator descriptors and the immutable registry that resolves them.

An operator is a pure function plus two pieces of metadata: its fixity (where
it sits relative to its operands) and its precedence (how tightly it binds
against other infix operators). Descriptors are collected into a plain dict
with the ``operator`` decorator and then frozen into an ``OperatorRegistry``.

Usage:
    table = {}

    @operator(table, "+", fixity=Fixity.INFIX, precedence=Precedence.NORMAL)
    def add(left: float, right: float) -> float:
        return left + right

    registry = OperatorRegistry(table.values())
    registry.create("+").evaluate(1.0, 2.0)
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping

from ..errors import UnknownOperatorError

logger = logging.getLogger(__name__)

# (left, right) -> result. Unary operators receive their operand as ``left``
# and 0.0 as ``right``.
OperatorFunction = Callable[[float, float], float]


class Fixity(Enum):
    INFIX = "infix"        # binary: 1 + 2
    FUNCTION = "function"  # unary, written before its operand: sqrt(4)
    SUFFIX = "suffix"      # unary, written after its operand: 5!

    @property
    def arity(self) -> int:
        return 2 if self is Fixity.INFIX else 1


class Precedence(IntEnum):
    NORMAL = 0
    MIDDLE = 1
    HIGH = 2


@dataclass(frozen=True)
class OperatorDescriptor:
    """Registered definition of one operator."""
    symbol: str
    fixity: Fixity
    precedence: Precedence
    evaluate: OperatorFunction
    description: str = ""

    def __post_init__(self):
        if not self.symbol:
            raise ValueError("Operator symbol must be a non-empty string")
        if not callable(self.evaluate):
            raise TypeError(f"Operator '{self.symbol}' evaluate must be callable")


class OperatorRegistry:
    """Read-only mapping from operator symbol to descriptor.

    The registry never changes after construction, so one instance can be
    shared by any number of concurrent evaluations. ``extend`` builds a new
    registry instead of modifying this one.
    """

    def __init__(self, descriptors: Iterable[OperatorDescriptor] = ()):
        table: Dict[str, OperatorDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.symbol in table:
                raise ValueError(f"Duplicate operator symbol: '{descriptor.symbol}'")
            table[descriptor.symbol] = descriptor
        self._operators: Mapping[str, OperatorDescriptor] = MappingProxyType(table)

    def is_valid(self, symbol: str) -> bool:
        """True iff ``symbol`` exactly matches a registered operator."""
        return symbol in self._operators

    def create(self, symbol: str) -> OperatorDescriptor:
        """Return the descriptor for ``symbol``.

        Raises:
            UnknownOperatorError: if nothing is registered under ``symbol``.
        """
        try:
            return self._operators[symbol]
        except KeyError:
            raise UnknownOperatorError(symbol) from None

    def symbols(self) -> List[str]:
        return list(self._operators)

    def extend(self, *descriptors: OperatorDescriptor) -> "OperatorRegistry":
        """Return a new registry holding these operators plus ``descriptors``."""
        return OperatorRegistry([*self._operators.values(), *descriptors])

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._operators

    def __iter__(self) -> Iterator[OperatorDescriptor]:
        return iter(self._operators.values())

    def __len__(self) -> int:
        return len(self._operators)

    def __repr__(self) -> str:
        return f"OperatorRegistry({', '.join(self._operators)})"


def operator(
    table: Dict[str, OperatorDescriptor],
    symbol: str,
    *,
    fixity: Fixity,
    precedence: Precedence,
) -> Callable[[OperatorFunction], OperatorFunction]:
    """
    Decorator that records a function as an operator in ``table``.

    The decorated function is returned unchanged so it stays directly callable.
    Registering the same symbol twice in one table raises ValueError.
    """
    def decorator_operator(func: OperatorFunction) -> OperatorFunction:
        if not callable(func):
            raise TypeError(f"Object {getattr(func, '__name__', '<unknown>')} must be callable to be registered as operator.")
        if symbol in table:
            raise ValueError(f"Operator '{symbol}' already registered")

        table[symbol] = OperatorDescriptor(
            symbol=symbol,
            fixity=fixity,
            precedence=precedence,
            evaluate=func,
            description=(func.__doc__ or "").strip(),
        )
        logger.debug(f"Registered operator: '{symbol}' -> {func.__name__} ({fixity.value}, {precedence.name})")
        return func

    return decorator_operator
