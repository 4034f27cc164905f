import pytest

from logics.input_map import handle_button, handle_key


def press(calc, *keys):
    return [handle_key(calc, k) for k in keys]


def test_keyboard_calculation(calc):
    assert press(calc, "5", "+", "3", "Return") == [True] * 4
    assert calc.display == "8"


@pytest.mark.parametrize("equals", ["Return", "KP_Enter", "Enter", "="])
def test_equals_keys(calc, equals):
    press(calc, "6", "*", "7", equals)
    assert calc.display == "42"


def test_operator_keys(calc):
    press(calc, "9", "-")
    assert calc.operation_symbol == "-"
    press(calc, "/")
    assert calc.operation_symbol == "/"
    assert calc.previous_operand == "9"


@pytest.mark.parametrize("key", ["BackSpace", "Backspace"])
def test_backspace_keys(calc, key):
    press(calc, "1", "2", key)
    assert calc.display == "1"


@pytest.mark.parametrize("key", ["Escape", "Delete"])
def test_clear_keys(calc, key):
    press(calc, "1", "2", key)
    assert calc.display == "0"


@pytest.mark.parametrize("key", ["a", "space", "F1", "Shift_L", "%"])
def test_unmapped_keys_do_nothing(calc, key):
    assert handle_key(calc, key) is False
    assert calc.display == "0"
    assert not calc.has_error


def test_buttons(calc):
    for name in ("1", "2", "sign", "multiply", "3", "equals"):
        assert handle_button(calc, name)
    assert calc.display == "-36"


def test_clear_and_backspace_buttons(calc):
    for name in ("4", "5", "backspace"):
        handle_button(calc, name)
    assert calc.display == "4"
    handle_button(calc, "add")
    handle_button(calc, "clear")
    assert calc.display == "4"
    assert calc.operation_symbol is None


def test_unknown_button(calc):
    assert handle_button(calc, "sqrt") is False
