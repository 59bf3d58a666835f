import re

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")

# Longer digit runs fall back to the default instead of being converted
MAX_KEY_DIGITS = 18


def parse_int_with_default(raw: str | int | None, default: int) -> int:
    """
    Parse a numeric key, falling back to a default.

    Reads an optional sign and the leading run of digits, ignoring anything
    after it ("5 rails" -> 5, "2.9" -> 2). Blank input, input with no leading
    digits, a parsed value of zero, and digit runs longer than
    ``MAX_KEY_DIGITS`` all yield ``default``; a zero shift or rail count is
    treated the same as a missing key.

    Args:
        raw: The raw key as typed by the user
        default: Value to use when no usable integer is present

    Returns:
        The parsed integer or ``default``
    """
    if raw is None:
        return default
    if isinstance(raw, int):
        return raw or default

    match = _LEADING_INT.match(raw)
    if not match:
        return default

    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if not digits or len(digits) > MAX_KEY_DIGITS:
        return default

    return int(sign + digits)
