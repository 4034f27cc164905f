def type_keys(calculator, text):
    """Feed a string of digits / '.' into add_digit one character at a time."""
    for ch in text:
        calculator.add_digit(ch)
