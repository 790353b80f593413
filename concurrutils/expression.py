"""Lazily evaluated expressions, strongly named values and a radian type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Hashable


@dataclass(frozen=True)
class StrongType:
    """A value with a tag, so that values of one underlying type stay distinct."""

    value: Any
    tag: Hashable = None


def _add_results(lhs: Expression, rhs: Expression) -> Any:
    return lhs() + rhs()


def _sub_results(lhs: Expression, rhs: Expression) -> Any:
    return lhs() - rhs()


class Expression:
    """A function and its arguments, evaluated only when the expression is called."""

    def __init__(self, func: Callable[..., Any], *args: Any) -> None:
        if not callable(func):
            raise TypeError("func must be callable")
        self._func = func
        self._args = args

    def __call__(self) -> Any:
        """Evaluate the expression."""
        return self._func(*self._args)

    def __add__(self, other: Any) -> Expression:
        """An expression for the sum of both results, not yet evaluated."""
        if not isinstance(other, Expression):
            return NotImplemented
        return Expression(_add_results, self, other)

    def __sub__(self, other: Any) -> Expression:
        """An expression for the difference of both results, not yet evaluated."""
        if not isinstance(other, Expression):
            return NotImplemented
        return Expression(_sub_results, self, other)


class BinaryExpression(Expression):
    """A two-argument function and its arguments, evaluated when called."""

    def __init__(self, func: Callable[[Any, Any], Any], arg1: Any, arg2: Any) -> None:
        super().__init__(func, arg1, arg2)

    def __call__(self) -> Any:
        """Evaluate the expression."""
        arg1, arg2 = self._args
        return self._func(arg1, arg2)

    def __float__(self) -> float:
        return float(self())

    def __add__(self, other: Any) -> BinaryExpression:
        """A binary expression for the sum of both results, not yet evaluated."""
        if not isinstance(other, BinaryExpression):
            return NotImplemented
        return BinaryExpression(_add_results, self, other)

    def __sub__(self, other: Any) -> BinaryExpression:
        """A binary expression for the difference of both results, not yet evaluated."""
        if not isinstance(other, BinaryExpression):
            return NotImplemented
        return BinaryExpression(_sub_results, self, other)


def _add_values(lhs: StrongType, rhs: StrongType) -> Any:
    return lhs.value + rhs.value


def add_strong(lhs: StrongType, rhs: StrongType) -> Expression:
    """An expression adding the values of two strong types, not yet evaluated."""
    if not isinstance(lhs, StrongType) or not isinstance(rhs, StrongType):
        raise TypeError("both operands must be StrongType values")
    return Expression(_add_values, lhs, rhs)


def _require_numeric(*values: Any) -> None:
    for value in values:
        if not isinstance(value, Real):
            raise TypeError(f"expected a number, got {type(value).__name__}")


def plus(a: Real, b: Real) -> Real:
    """Sum of two numbers."""
    _require_numeric(a, b)
    return a + b


def minus(a: Real, b: Real) -> Real:
    """Difference of two numbers."""
    _require_numeric(a, b)
    return a - b


def to_degrees(radian: float) -> float:
    """Convert an angle from radians to degrees."""
    return (180.0 / math.pi) * radian


@dataclass(frozen=True)
class Radian:
    """An angle in radians."""

    r: float

    def to_degree(self) -> float:
        """The angle in degrees."""
        return (self.r / math.pi) * 180

    def __add__(self, other: Any) -> Radian:
        if isinstance(other, Radian):
            return Radian(self.r + other.r)
        if isinstance(other, Real):
            return Radian(self.r + float(other))
        return NotImplemented

    __radd__ = __add__

    def __float__(self) -> float:
        return float(self.r)

    def __str__(self) -> str:
        return f"r= {self.to_degree():g}[degrees]"