"""Numeric display policy for conversion results."""

# Results closer than this to an integer are shown as that integer
EPSILON = 0.005

DEFAULT_PRECISION = 2
MAX_PRECISION = 15


def format_amount(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format an amount for display.

    Args:
        value: The amount to format
        precision: Number of decimal places for non-integral amounts

    Returns:
        The nearest integer if `value` is within EPSILON of it, otherwise
        `value` in fixed-point notation with `precision` decimals.
    """
    nearest = round(value)
    if abs(value - nearest) < EPSILON:
        return str(int(nearest))
    return f"{value:.{precision}f}"
