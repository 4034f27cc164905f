import math
import re


MAX_FRACTION_DIGITS = 10

# Rendered in place of values that have no numeral form
_SENTINELS = {
    '∞': math.inf,
    '-∞': -math.inf,
    'NaN': math.nan,
}

_NUMERAL = re.compile(r'-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


def text_to_number(text):
    """
    Convert display text to a float.

    Grouping commas are stripped and the remainder must be a plain numeral:
    optional leading '-', digits, at most one '.'. The sentinel strings
    produced by number_to_text parse back to their values.

    Args:
        text: Display text, e.g. "1,234.5".

    Returns:
        The parsed float, or NaN if the text is not a numeral.
    """
    cleaned = text.replace(',', '')
    if cleaned in _SENTINELS:
        return _SENTINELS[cleaned]
    if not _NUMERAL.fullmatch(cleaned):
        return math.nan
    return float(cleaned)


def number_to_text(value):
    """
    Format a number as display text.

    - Integer part grouped with commas: 1234567 -> "1,234,567"
    - Integers have no fractional part
    - Non-integers keep at most MAX_FRACTION_DIGITS digits (rounded at the
      last one), trailing zeros removed
    - inf / -inf / nan -> "∞" / "-∞" / "NaN"
    """
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return '∞' if value > 0 else '-∞'

    if value.is_integer():
        text = f'{value:,.0f}'
    else:
        text = f'{value:,.{MAX_FRACTION_DIGITS}f}'.rstrip('0').rstrip('.')

    # -0.0 and values that round away to nothing
    if text == '-0':
        return '0'
    return text


def renormalize(text):
    """Re-render display text in canonical grouped form."""
    return number_to_text(text_to_number(text))


def count_digits(text):
    """Count the 0-9 characters in display text (commas, '.', '-' excluded)."""
    return sum(1 for ch in text if '0' <= ch <= '9')
