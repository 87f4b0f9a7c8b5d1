"""
Decimal Arithmetic
==================
Number crunching behind the calculator keys.

All values are `decimal.Decimal`. Addition, subtraction and multiplication are
exact (within `EXACT_CONTEXT`), division-like operations are rounded half-up
to a fixed number of fractional digits, and the two "float" operations
(square root, power) go through IEEE doubles via numpy and are rounded
afterwards.

Functions raise subclasses of `CalculatorError` on failure; turning that into
an on-screen error is the engine's job.
"""
from __future__ import annotations

import math
from decimal import (
    Context, Decimal, DecimalException, DivisionByZero, InvalidOperation, Overflow,
    ROUND_HALF_UP, MAX_EMAX, MIN_EMIN,
)
from fractions import Fraction
from typing import Callable, Optional

import numpy as np

from deskcalc.model.errors import (
    DivideByZeroError, DomainError, ModByZeroError, NonFiniteResultError,
)
from deskcalc.model.events import BinaryOperator

DIVISION_SCALE = 12   # fractional digits kept by /, 1/x
PERCENT_SCALE = 12    # fractional digits of operand / 100
FLOAT_SCALE = 10      # fractional digits kept by sqrt and x^y

ZERO = Decimal(0)
ONE = Decimal(1)
HUNDRED = Decimal(100)

# Wide enough that anything typed on the display adds and multiplies exactly.
EXACT_CONTEXT = Context(
    prec=1000,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


# ------------------------------------------------------------------------------
# Conversion
# ------------------------------------------------------------------------------
def parse_decimal(text: str) -> Decimal:
    """
    Interpret display text as a number.

    Anything that is not a finite decimal literal (including the error
    marker) is read as zero.
    """
    try:
        value = Decimal(text)
    except (InvalidOperation, TypeError, ValueError):
        return ZERO
    if not value.is_finite():
        return ZERO
    return value


def format_decimal(value: Decimal) -> str:
    """
    Plain-notation display text: no trailing fractional zeros, no decimal
    point for whole numbers, never an exponent.
    """
    if value.is_zero():
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def round_half_up(value: Decimal, places: int) -> Decimal:
    """Round to `places` fractional digits, ties away from zero."""
    return value.quantize(Decimal(1).scaleb(-places), context=EXACT_CONTEXT)


def _round_fraction(value: Fraction, places: int) -> Decimal:
    scaled = abs(value) * 10 ** places
    whole = math.floor(scaled + Fraction(1, 2))
    if value < 0:
        whole = -whole
    return Decimal(whole).scaleb(-places, context=EXACT_CONTEXT)


def _from_float(value: np.floating, places: int) -> Decimal:
    if not np.isfinite(value):
        raise NonFiniteResultError(f"Result is not a finite number: {value}")
    return round_half_up(Decimal(float(value)), places)


# ------------------------------------------------------------------------------
# Binary operations
# ------------------------------------------------------------------------------
def add(a: Decimal, b: Decimal) -> Decimal:
    return EXACT_CONTEXT.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return EXACT_CONTEXT.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    return EXACT_CONTEXT.multiply(a, b)


def divide(a: Decimal, b: Decimal, places: int = DIVISION_SCALE) -> Decimal:
    """Quotient rounded half-up to `places` fractional digits."""
    if b.is_zero():
        raise DivideByZeroError("Division by zero")
    return _round_fraction(Fraction(a) / Fraction(b), places)


def modulus(a: Decimal, b: Decimal) -> Decimal:
    """Truncating remainder; the sign follows the dividend."""
    if b.is_zero():
        raise ModByZeroError("Modulus by zero")
    return EXACT_CONTEXT.remainder(a, b)


def power(a: Decimal, b: Decimal) -> Decimal:
    """
    `a` raised to `b` in double precision, rounded to FLOAT_SCALE digits.

    Undefined or overflowing results (negative base with a fractional
    exponent, 0 to a negative power, huge exponents) come back from numpy as
    NaN/Infinity and are reported as NonFiniteResultError.
    """
    with np.errstate(all="ignore"):
        result = np.power(np.float64(float(a)), np.float64(float(b)))
    return _from_float(result, FLOAT_SCALE)


OPERATIONS: dict[BinaryOperator, Callable[[Decimal, Decimal], Decimal]] = {
    BinaryOperator.ADD: add,
    BinaryOperator.SUBTRACT: subtract,
    BinaryOperator.MULTIPLY: multiply,
    BinaryOperator.DIVIDE: divide,
    BinaryOperator.MODULUS: modulus,
    BinaryOperator.POWER: power,
}


def evaluate(a: Decimal, b: Decimal, op: BinaryOperator) -> Decimal:
    """Apply a pending binary operator to the accumulator and the new operand."""
    try:
        return OPERATIONS[op](a, b)
    except DecimalException as e:
        # Exponent or precision blow-up inside the decimal context.
        raise NonFiniteResultError(f"{a} {op} {b} cannot be represented") from e


# ------------------------------------------------------------------------------
# Unary operations
# ------------------------------------------------------------------------------
def square_root(x: Decimal) -> Decimal:
    if x < 0:
        raise DomainError(f"Square root of negative number {x}")
    with np.errstate(all="ignore"):
        result = np.sqrt(np.float64(float(x)))
    return _from_float(result, FLOAT_SCALE)


def reciprocal(x: Decimal) -> Decimal:
    return divide(ONE, x, DIVISION_SCALE)


def negate(x: Decimal) -> Decimal:
    return EXACT_CONTEXT.minus(x)


def percent(x: Decimal, base: Optional[Decimal] = None) -> Decimal:
    """
    `x` percent. With a `base` (the accumulator of a pending operation) the
    result is that share of the base, e.g. 200 + 10% gives 20.
    """
    fraction = divide(x, HUNDRED, PERCENT_SCALE)
    if base is None:
        return fraction
    return multiply(base, fraction)
