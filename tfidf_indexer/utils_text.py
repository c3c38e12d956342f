import re
from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP
from typing import List

RE_NON_ALNUM = re.compile(r"[^a-z0-9 ]")  # anything but lowercase ascii, digits, space


def line_to_tokens(line: str) -> List[str]:
    """
    Lowercase a line, blank out every character outside [a-z0-9 ] and split on whitespace.

    Args:
        line: Raw text, any case.

    Returns:
        List[str]: Raw tokens, never empty strings.
    """
    return RE_NON_ALNUM.sub(" ", line.lower()).split()


def _quantize(value: float, places: int, rounding: str) -> float:
    # str() gives the shortest repr, so 0.1 stays 0.1 instead of 0.1000000000000000055...
    exp = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exp, rounding=rounding))


def round_ceiling(value: float, places: int = 4) -> float:
    """Round toward positive infinity at ``places`` decimals (1/3 -> 0.3334)."""
    return _quantize(value, places, ROUND_CEILING)


def round_half_up(value: float, places: int = 4) -> float:
    """Standard rounding, ties away from zero (0.00005 -> 0.0001)."""
    return _quantize(value, places, ROUND_HALF_UP)
