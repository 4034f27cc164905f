from enum import Enum

import numpy as np


# Largest integer a float64 holds exactly (2**53 - 1)
MAX_SAFE_INTEGER = 2 ** 53 - 1


class UnsupportedOperation(ValueError):
    """Raised when an operation tag outside OperatorKind reaches the arithmetic layer."""
    pass


class OperatorKind(Enum):
    """The four binary operations the calculator can hold as pending."""

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @property
    def symbol(self):
        return self.value


def combine(kind, previous, current):
    """
    Apply a pending operation to its two operands.

    Arithmetic runs in numpy float64 so overflow, 0/0 and x/0 produce
    inf / nan the IEEE way instead of raising. Callers check the result
    with validate_result().

    Args:
        kind: OperatorKind of the pending operation.
        previous: First operand (the stashed display value, 0 if absent).
        current: Second operand (the display value at calculate time).

    Returns:
        float result, possibly nan or +/-inf.

    Raises:
        UnsupportedOperation: If kind is not an OperatorKind.
    """
    a = np.float64(previous)
    b = np.float64(current)

    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        if kind is OperatorKind.ADD:
            result = a + b
        elif kind is OperatorKind.SUBTRACT:
            result = a - b
        elif kind is OperatorKind.MULTIPLY:
            result = a * b
        elif kind is OperatorKind.DIVIDE:
            result = a / b
        else:
            raise UnsupportedOperation(f"Unsupported operation: {kind!r}")

    return float(result)


def validate_result(value):
    """
    Check a computed value before it is shown.

    Returns:
        None if the value can be displayed, otherwise the user-facing
        error message ("Invalid operation", "Overflow", "Number too large").
    """
    if np.isnan(value):
        return "Invalid operation"
    if np.isinf(value):
        return "Overflow"
    if abs(value) > MAX_SAFE_INTEGER:
        return "Number too large"
    return None
