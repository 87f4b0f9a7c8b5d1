"""
Arithmetic Errors
=================
Exceptions raised by the arithmetic layer.

The reducer in `deskcalc.model.engine` catches `CalculatorError` and replaces
the display with the error marker, so none of these ever reach the GUI.
"""


class CalculatorError(ArithmeticError):
    """Base class for every failure the calculator reports on its display."""


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """Division (or reciprocal) by zero."""


class ModByZeroError(DivideByZeroError):
    """Modulus with a zero divisor."""


class DomainError(CalculatorError, ValueError):
    """Operand outside the domain of the function (square root of a negative)."""


class NonFiniteResultError(CalculatorError, OverflowError):
    """Floating-point power produced NaN or Infinity."""
