import pytest

from deskcalc.model.engine import CalculatorEngine
from deskcalc.model.events import (
    AllClear, Backspace, BinaryOperator, ClearEntry, DecimalPoint, Digit, Equals,
    Memory, MemoryAction, Operator, Unary, UnaryOperator,
)

# Keypad shorthand used by the tests; independent of the GUI captions
KEYS = {
    ".": DecimalPoint(),
    "+": Operator(BinaryOperator.ADD),
    "-": Operator(BinaryOperator.SUBTRACT),
    "*": Operator(BinaryOperator.MULTIPLY),
    "/": Operator(BinaryOperator.DIVIDE),
    "mod": Operator(BinaryOperator.MODULUS),
    "^": Operator(BinaryOperator.POWER),
    "=": Equals(),
    "C": ClearEntry(),
    "AC": AllClear(),
    "BS": Backspace(),
    "sqrt": Unary(UnaryOperator.SQRT),
    "1/x": Unary(UnaryOperator.RECIPROCAL),
    "neg": Unary(UnaryOperator.NEGATE),
    "%": Unary(UnaryOperator.PERCENT),
    "MC": Memory(MemoryAction.CLEAR),
    "MR": Memory(MemoryAction.RECALL),
    "M+": Memory(MemoryAction.ADD),
    "M-": Memory(MemoryAction.SUBTRACT),
}
KEYS.update({str(d): Digit(d) for d in range(10)})


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press(engine):
    """Feed keys to the engine; multi-digit tokens are typed digit by digit."""
    def _press(*keys: str) -> str:
        for key in keys:
            if key in KEYS:
                engine.dispatch(KEYS[key])
            else:
                for char in key:
                    engine.dispatch(KEYS[char])
        return engine.display
    return _press
