"""Module for miscellaneous multi-use functions"""

__all__ = ['format_number', 'quantize_wkt', 'round_half_up']

import re

from pydantic import validate_call

from wktsketch._const import DEFAULT_QUANTIZE_PRECISION

# A numeric literal that isn't the tail end of an identifier, e.g. '-12.5' or '3e-4'
_RE_NUMBER = re.compile(r'(?<![\w.])-?\d+(?:\.\d*)?(?:[eE][-+]?\d+)?')


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def format_number(value: float) -> str:
    """
    Writes a number in its natural decimal form, e.g. 30.0 -> '30' and 0.5 -> '0.5'.

    Args:
        value:
            The number to format

    Returns:
        str
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))

    return repr(value)


@validate_call
def quantize_wkt(wkt: str, precision: int = DEFAULT_QUANTIZE_PRECISION) -> str:
    """
    Rounds every number in a block of WKT text to a fixed number of decimal
    places. Anything that isn't a number (tags, punctuation, whitespace) is
    left exactly as it was.

    Args:
        wkt:
            WKT text, possibly containing several statements

        precision: (int)
            (Default 2) The number of decimal places to keep

    Returns:
        str
    """
    if not wkt.strip():
        return wkt

    return _RE_NUMBER.sub(
        lambda match: format_number(round_half_up(float(match.group()), precision)),
        wkt
    )
