"""
Calculator State (Data Model)
=============================
The complete state of one calculator, as a single immutable value.

Why is this file needed?
------------------------
1. State Management: display text, accumulator, pending operator, input-fresh
   flag and memory register live in one object instead of widget fields.
2. Purity: the reducer in `deskcalc.model.engine` takes a state and returns a
   new one, which keeps every transition trivially testable.
3. Persistence: `to_dict()` / `from_dict()` give a JSON-compatible snapshot.

Classes:
    CalculatorState: The immutable state container.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import re
from decimal import Decimal
from typing import Any, Dict, Optional

from deskcalc.model.arithmetic import ZERO, parse_decimal
from deskcalc.model.events import BinaryOperator

logger = logging.getLogger(__name__)

ERROR_MARKER = "Error"
DISPLAY_PATTERN = re.compile(r"-?\d+(\.\d*)?")


@dataclass(frozen=True)
class CalculatorState:
    display: str = "0"
    accumulator: Decimal = ZERO
    pending: Optional[BinaryOperator] = None
    start_new_number: bool = True
    # An operand (typed, recalled or a unary result) is waiting for the next operator
    operand_entered: bool = False
    memory: Decimal = ZERO
    # True while `display` holds the error marker
    error: bool = False

    def evolve(self, **changes: Any) -> CalculatorState:
        """Copy with the given fields replaced. Any display change drops the error flag."""
        if "display" in changes and "error" not in changes:
            changes["error"] = False
        return replace(self, **changes)

    def with_error(self) -> CalculatorState:
        return replace(self, display=ERROR_MARKER, error=True, start_new_number=True,
                       operand_entered=False)

    @property
    def value(self) -> Decimal:
        """The display text read as a number."""
        return parse_decimal(self.display)

    @property
    def has_memory(self) -> bool:
        return not self.memory.is_zero()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "display": self.display,
            "accumulator": str(self.accumulator),
            "pending": None if self.pending is None else str(self.pending),
            "start_new_number": self.start_new_number,
            "operand_entered": self.operand_entered,
            "memory": str(self.memory),
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CalculatorState:
        """
        Rebuild a state from `to_dict()` output.

        Missing keys take their defaults; unreadable numbers become zero.
        """
        pending = data.get("pending")
        if pending is not None:
            try:
                pending = BinaryOperator(pending)
            except ValueError:
                logger.warning(f"Ignoring unknown pending operator '{pending}'.")
                pending = None

        error = bool(data.get("error", False))
        display = str(data.get("display", "0"))
        if error:
            display = ERROR_MARKER
        elif not DISPLAY_PATTERN.fullmatch(display):
            logger.warning(f"Display text '{display}' is not a number, resetting to 0.")
            display = "0"

        return cls(
            display=display,
            accumulator=parse_decimal(str(data.get("accumulator", "0"))),
            pending=pending,
            start_new_number=bool(data.get("start_new_number", True)),
            operand_entered=bool(data.get("operand_entered", False)) and not error,
            memory=parse_decimal(str(data.get("memory", "0"))),
            error=error,
        )
