"""
Errors raised while reading WKT. All of them are ValueErrors, so callers
catching ValueError continue to work.
"""

__all__ = [
    'MalformedNumericError', 'UnbalancedSpanError', 'UnrecognizedTypeError',
    'WKTParseError'
]


class WKTParseError(ValueError):
    """A WKT statement could not be turned into a geometry"""


class UnrecognizedTypeError(WKTParseError):
    """The statement's type tag is not one of the supported geometry types"""

    def __init__(self, tag: str):
        super().__init__(f'Unsupported WKT geometry type: {tag}')
        self.tag = tag


class UnbalancedSpanError(WKTParseError):
    """An opening parenthesis has no matching closing parenthesis"""

    def __init__(self, position: int):
        super().__init__(f'Unbalanced parenthesis opened at offset {position}')
        self.position = position


class MalformedNumericError(WKTParseError):
    """A coordinate ordinate is not a finite number"""

    def __init__(self, token: str):
        super().__init__(f'Invalid coordinate value: {token!r}')
        self.token = token
