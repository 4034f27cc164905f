from logics.computation import OperatorKind


DIGIT_KEYS = ('0', '1', '2', '3', '4', '5', '6', '7', '8', '9', '.')

OPERATOR_KEYS = {kind.symbol: kind for kind in OperatorKind}

# Keysyms as reported by tkinter, plus the browser-style names
EQUALS_KEYS = ('Return', 'KP_Enter', 'Enter', '=')
BACKSPACE_KEYS = ('BackSpace', 'Backspace')
CLEAR_KEYS = ('Escape', 'Delete')

# Keypad button names -> calculator method
BUTTON_ACTIONS = {
    'equals': 'calculate',
    'clear': 'clear',
    'backspace': 'backspace',
    'sign': 'toggle_sign',
}

BUTTON_OPERATIONS = {
    'add': OperatorKind.ADD,
    'subtract': OperatorKind.SUBTRACT,
    'multiply': OperatorKind.MULTIPLY,
    'divide': OperatorKind.DIVIDE,
}


def handle_key(calculator, key):
    """
    Translate a key press into a single calculator call.

    Args:
        calculator: Calculator instance.
        key: Character or keysym, e.g. "7", "+", "Return", "BackSpace".

    Returns:
        True if the key was mapped (and the call made), False otherwise.
    """
    if key in DIGIT_KEYS:
        calculator.add_digit(key)
    elif key in OPERATOR_KEYS:
        calculator.select_operation(OPERATOR_KEYS[key])
    elif key in EQUALS_KEYS:
        calculator.calculate()
    elif key in BACKSPACE_KEYS:
        calculator.backspace()
    elif key in CLEAR_KEYS:
        calculator.clear()
    else:
        return False
    return True


def handle_button(calculator, name):
    """Same as handle_key, for keypad button names ("7", "add", "sign", ...)."""
    if name in DIGIT_KEYS:
        calculator.add_digit(name)
    elif name in BUTTON_OPERATIONS:
        calculator.select_operation(BUTTON_OPERATIONS[name])
    elif name in BUTTON_ACTIONS:
        getattr(calculator, BUTTON_ACTIONS[name])()
    else:
        return False
    return True
