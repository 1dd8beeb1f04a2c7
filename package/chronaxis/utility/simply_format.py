"""Simple number formatting utilities."""


def format_fixed_float(number: float, width: int = 4, positive_sign: bool = False) -> str:
    """Format a number into exactly `width` characters, clamping at the limits."""
    width = max(width, 4)

    if number < 0 or (positive_sign and number >= 0):
        # when sign should be included
        absolute_limit = 10 ** (width - 1)
    else:
        absolute_limit = 10**width

    if abs(number) >= absolute_limit:
        number = absolute_limit - 1 if number > 0 else -absolute_limit + 1

    string = f"{number:12.12f}"

    if positive_sign and number >= 0:
        string = "+" + string

    string = string[:width]

    return string.removesuffix(".")
