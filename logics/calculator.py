import math
import re
from functools import wraps

from logics.computation import OperatorKind, UnsupportedOperation, combine, validate_result
from logics.data_model import CalculatorSnapshot
from logics.display_format import count_digits, number_to_text, renormalize, text_to_number


MAX_DIGITS = 15
ERROR_DISPLAY = "Error"

_DIGIT = re.compile(r'[0-9.]')


def _publishes(method):
    """Notify the listener once the outermost public operation has finished."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        self._depth += 1
        try:
            return method(self, *args, **kwargs)
        finally:
            self._depth -= 1
            if self._depth == 0 and self._listener is not None:
                self._listener(self.snapshot())
    return wrapper


class Calculator:
    """
    Calculator state machine.

    Holds the display text, at most one pending operation with its stashed
    first operand, and an optional error message. Every public operation
    runs to completion and replaces the display text wholesale.

    Errors typed or computed by the user never raise: they set `error` and
    force the display to "Error". Only an operation tag outside
    OperatorKind raises (UnsupportedOperation).

    Args:
        listener: Optional callable(CalculatorSnapshot) invoked after every
            public operation, e.g. to re-render a window.
    """

    def __init__(self, listener=None):
        self._display = "0"
        self._previous = None                       # Stashed display text of the first operand
        self._pending = None                        # OperatorKind awaiting its second operand
        self._error = None
        self._listener = listener
        self._depth = 0
        self.history = []                           # Completed calculations, oldest first

    # ── Accessors ────────────────────────────────────────────

    @property
    def display(self):
        return self._display

    @property
    def previous_operand(self):
        return self._previous

    @property
    def operation_symbol(self):
        return self._pending.symbol if self._pending is not None else None

    @property
    def error(self):
        return self._error

    @property
    def has_error(self):
        return self._error is not None

    def snapshot(self):
        return CalculatorSnapshot(
            display=self._display,
            previous_operand=self._previous,
            operation=self.operation_symbol,
            error=self._error,
        )

    @classmethod
    def from_snapshot(cls, snapshot, listener=None):
        """
        Restore a calculator from a snapshot (or its dict form).

        Raises:
            UnsupportedOperation: If the snapshot names an unknown operation symbol.
        """
        if isinstance(snapshot, dict):
            snapshot = CalculatorSnapshot.from_dict(snapshot)
        calc = cls(listener=listener)
        calc._display = snapshot.display
        calc._previous = snapshot.previous_operand
        calc._error = snapshot.error
        if snapshot.operation is not None:
            try:
                calc._pending = OperatorKind(snapshot.operation)
            except ValueError:
                raise UnsupportedOperation(f"Unsupported operation: {snapshot.operation!r}")
        return calc

    # ── Input ────────────────────────────────────────────────

    @_publishes
    def add_digit(self, digit):
        """
        Append a digit or decimal point to the display.

        A pending error is cleared first and the calculation starts fresh.
        Leading zeros are suppressed, a second '.' is ignored, and the text is
        regrouped after each digit unless a fraction is mid-way through being
        typed ("10." or "10.0" stay as typed).
        """
        if self._error is not None:
            self._reset()

        if not isinstance(digit, str) or not _DIGIT.fullmatch(digit):
            self._set_error("Invalid input")
            return

        if digit != '.' and count_digits(self._display) >= MAX_DIGITS:
            self._set_error("Max digits reached")
            return

        if self._display == "0" and digit != '.':
            self._display = digit
            return

        if digit == '.' and '.' in self._display:
            return

        self._display += digit

        if '.' in self._display and (digit == '.' or self._display.endswith('0')):
            return
        self._display = renormalize(self._display)

    @_publishes
    def select_operation(self, operation):
        """
        Make `operation` the pending operation.

        An already pending operation is resolved first, so chains evaluate
        strictly left to right: 5 + 3 * 2 -> 16. The current display becomes
        the first operand and the display resets to "0".
        """
        if not isinstance(operation, OperatorKind):
            raise UnsupportedOperation(f"Unsupported operation: {operation!r}")

        if self._pending is not None:
            self.calculate()

        # Selecting from an error leaves it unresolved
        if self._error is not None:
            return

        self._pending = operation
        self._previous = self._display
        self._display = "0"

    @_publishes
    def calculate(self):
        """Resolve the pending operation with the display as second operand."""
        if self._pending is None:
            return

        current = text_to_number(self._display)
        if not math.isfinite(current):
            self._fail("Invalid number")
            return

        if self._pending is OperatorKind.DIVIDE and current == 0:
            self._fail("Cannot divide by zero")
            return

        previous = text_to_number(self._previous) if self._previous is not None else 0.0
        result = combine(self._pending, previous, current)

        message = validate_result(result)
        if message is not None:
            self._fail(message)
            return

        expression = f"{self._previous if self._previous is not None else '0'} {self._pending.symbol} {self._display}"
        self._display = number_to_text(result)
        self.history.append({
            'expression': expression,
            'result': self._display,
            'value': result,
        })
        self._previous = None
        self._pending = None

    @_publishes
    def cancel_operation(self):
        """Drop the pending operation and show its first operand again."""
        # The error marker stays up until add_digit or clear
        if self._error is None:
            self._display = self._previous if self._previous is not None else "0"
        self._previous = None
        self._pending = None

    @_publishes
    def clear(self):
        """
        Clear one level.

        With a pending operation only the operation is dropped and the first
        operand shows again; otherwise everything resets to "0". Either way
        an active error is cleared.
        """
        self._error = None
        if self._pending is not None:
            self.cancel_operation()
        else:
            self._reset()

    @_publishes
    def toggle_sign(self):
        if self._error is not None:
            return

        value = text_to_number(self._display)
        if math.isnan(value):
            self._fail("Invalid number")
            return

        negated = -value
        message = validate_result(negated)
        if message is not None:
            self._fail(message)
            return
        self._display = number_to_text(negated)

    @_publishes
    def backspace(self):
        """Remove the last character of the raw display text (no regrouping)."""
        if self._error is not None:
            return

        self._display = self._display[:-1]
        if self._display in ("", "-"):
            self._display = "0"

    # ── Internals ────────────────────────────────────────────

    def _reset(self):
        self._display = "0"
        self._previous = None
        self._pending = None
        self._error = None

    def _set_error(self, message):
        print(f"[CALC] {message} (display={self._display!r})")
        self._error = message
        self._display = ERROR_DISPLAY

    def _fail(self, message):
        self._set_error(message)
        self._previous = None
        self._pending = None
