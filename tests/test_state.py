import json
from decimal import Decimal

from deskcalc.model.events import BinaryOperator
from deskcalc.model.state import CalculatorState, ERROR_MARKER


def test_defaults():
    state = CalculatorState()
    assert state.display == "0"
    assert state.accumulator == 0
    assert state.pending is None
    assert state.start_new_number
    assert state.memory == 0
    assert not state.error


def test_round_trip_mid_computation(press, engine):
    press("12", "M+", "*", "3.5")
    data = engine.state.to_dict()

    restored = CalculatorState.from_dict(json.loads(json.dumps(data)))
    assert restored == engine.state
    assert restored.pending == BinaryOperator.MULTIPLY
    assert restored.accumulator == Decimal(12)


def test_round_trip_error_state(press, engine):
    press("1", "/", "0", "=")
    restored = CalculatorState.from_dict(engine.state.to_dict())
    assert restored.display == ERROR_MARKER
    assert restored.error


def test_from_dict_with_garbage():
    state = CalculatorState.from_dict({
        "display": "12abc",
        "accumulator": "not a number",
        "pending": "??",
        "memory": None,
    })
    assert state.display == "0"
    assert state.accumulator == 0
    assert state.pending is None
    assert state.memory == 0
    assert state.start_new_number


def test_from_dict_missing_keys():
    assert CalculatorState.from_dict({}) == CalculatorState()


def test_display_change_clears_error():
    state = CalculatorState().with_error()
    assert state.error
    assert not state.evolve(display="4").error
    assert state.evolve(memory=Decimal(1)).error


def test_value_reads_error_marker_as_zero():
    assert CalculatorState().with_error().value == 0


def test_round_trip_keeps_entered_operand(press, engine):
    press("200", "+", "10", "%")
    restored = CalculatorState.from_dict(engine.state.to_dict())
    assert restored.operand_entered
    assert restored.start_new_number


def test_error_clears_entered_operand():
    state = CalculatorState(display="5", operand_entered=True).with_error()
    assert not state.operand_entered
