"""
Low-level WKT reading: balanced parenthesis scanning, coordinate and ring
lists, and locating `TAG (...)` statements within a span of text.

Every function here receives the text along with explicit offsets and keeps
its position in local variables, so calls never share scan state.
"""

__all__ = [
    'Statement', 'TextRange', 'find_closing_paren', 'iter_statements',
    'parse_coordinate', 'parse_coordinate_list', 'parse_multipoint_body',
    'parse_polygon_group_list', 'parse_ring', 'parse_ring_list',
    'read_statement', 'split_groups'
]

import re
from typing import Iterator, List, NamedTuple, Optional, Tuple

from wktsketch.coordinates import Coordinate
from wktsketch.exceptions import UnbalancedSpanError, WKTParseError
from wktsketch.utils.logging import LOGGER

# The head of a statement: a tag, an optional Z/M/ZM qualifier, and either
# an opening parenthesis or the EMPTY keyword, e.g. 'POLYGON Z (' or 'POINT EMPTY'
_RE_STATEMENT_HEAD = re.compile(
    r'\b([A-Za-z_]\w*)(?:\s+(ZM|Z|M))?(?:\s*(\()|\s+(EMPTY)\b)',
    flags=re.IGNORECASE
)


class TextRange(NamedTuple):
    """A half-open [start, end) span of character offsets"""
    start: int
    end: int

    def __contains__(self, offset) -> bool:
        return self.start <= offset <= self.end


class Statement(NamedTuple):
    """
    One `TAG (...)` or `TAG EMPTY` clause located in a block of text.

    `body` is the text between the outer parentheses, or None for EMPTY.
    `start` and `end` are offsets into the scanned text.
    """
    tag: str
    qualifier: Optional[str]
    body: Optional[str]
    start: int
    end: int

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)


def find_closing_paren(text: str, start: int, end: Optional[int] = None) -> int:
    """
    Finds the parenthesis that closes the one at `start` by counting nesting
    depth.

    Args:
        text:
            The text being scanned

        start: (int)
            The offset of an opening parenthesis

        end: (int)
            (Optional) Scanning stops before this offset. Defaults to the
            end of the text.

    Returns:
        The offset of the matching closing parenthesis

    Raises:
        UnbalancedSpanError if depth never returns to zero
    """
    end = len(text) if end is None else end
    if text[start] != '(':
        raise WKTParseError(f'Expected "(" at offset {start}')

    depth = 0
    for idx in range(start, end):
        char = text[idx]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return idx

    raise UnbalancedSpanError(start)


def split_groups(text: str, start: int = 0, end: Optional[int] = None) -> List[Tuple[int, int]]:
    """
    Locates each top-level parenthesized group in a comma-separated list,
    e.g. '(1 2, 3 4), (5 6, 7 8)'.

    Args:
        text:
            The text being scanned

        start: (int)
            (Default 0) Offset at which the list begins

        end: (int)
            (Optional) Offset at which the list ends

    Returns:
        List of (start, end) offsets, one per group, where each span includes
        its own parentheses
    """
    end = len(text) if end is None else end
    groups = []
    expect_group = True
    pos = start
    while pos < end:
        char = text[pos]
        if char.isspace():
            pos += 1
            continue

        if expect_group and char == '(':
            close = find_closing_paren(text, pos, end)
            groups.append((pos, close + 1))
            pos = close + 1
            expect_group = False
            continue

        if not expect_group and char == ',':
            expect_group = True
            pos += 1
            continue

        raise WKTParseError(f'Unexpected {char!r} at offset {pos}')

    if expect_group:
        # Either nothing at all, or a dangling comma
        raise WKTParseError('Expected a parenthesized group')

    return groups


def parse_coordinate(text: str) -> Coordinate:
    return Coordinate.from_wkt(text)


def parse_coordinate_list(text: str) -> List[Coordinate]:
    """Parses a comma-separated coordinate list, e.g. '1 2, 3 4'"""
    return [parse_coordinate(part) for part in text.split(',')]


def parse_ring(text: str) -> List[Coordinate]:
    """Parses a single parenthesized coordinate list, e.g. '(1 2, 3 4)'"""
    text = text.strip()
    if not (text.startswith('(') and text.endswith(')')):
        raise WKTParseError(f'Expected a parenthesized coordinate list: {text!r}')

    return parse_coordinate_list(text[1:-1])


def parse_ring_list(text: str) -> List[List[Coordinate]]:
    """Parses a list of rings, e.g. '(1 2, 3 4, 5 6), (7 8, 9 10, 11 12)'"""
    return [
        parse_ring(text[group_start:group_end])
        for group_start, group_end in split_groups(text)
    ]


def parse_polygon_group_list(text: str) -> List[List[List[Coordinate]]]:
    """Parses a list of ring lists, e.g. '((1 2, ...), (...)), ((...))'"""
    return [
        parse_ring_list(text[group_start + 1:group_end - 1])
        for group_start, group_end in split_groups(text)
    ]


def parse_multipoint_body(text: str) -> List[Coordinate]:
    """
    Parses the body of a MULTIPOINT, which may be written either bare
    ('1 2, 3 4') or with each point parenthesized ('(1 2), (3 4)').
    """
    if '(' not in text:
        return parse_coordinate_list(text)

    coords = []
    for ring in parse_ring_list(text):
        if len(ring) != 1:
            raise WKTParseError(f'MultiPoint members must hold one coordinate, got {len(ring)}')
        coords.append(ring[0])

    return coords


def _complete_statement(text: str, match: re.Match, end: int) -> Statement:
    """Finds the body of a matched statement head"""
    tag = match.group(1).upper()
    qualifier = match.group(2).upper() if match.group(2) else None
    if match.group(4):
        return Statement(tag, qualifier, None, match.start(), match.end())

    open_idx = match.start(3)
    close_idx = find_closing_paren(text, open_idx, end)
    return Statement(
        tag, qualifier, text[open_idx + 1:close_idx], match.start(), close_idx + 1
    )


def read_statement(text: str, start: int = 0, end: Optional[int] = None) -> Statement:
    """
    Reads the statement whose tag begins exactly at `start`.

    Raises:
        WKTParseError if no statement begins there, or UnbalancedSpanError
        if its parentheses never close
    """
    end = len(text) if end is None else end
    match = _RE_STATEMENT_HEAD.match(text, start, end)
    if match is None:
        raise WKTParseError(f'Expected a WKT statement at offset {start}')

    return _complete_statement(text, match, end)


def iter_statements(text: str, start: int = 0, end: Optional[int] = None) -> Iterator[Statement]:
    """
    Yields every top-level statement between `start` and `end`, in order of
    appearance. Scanning resumes after each statement's closing parenthesis,
    so statements nested inside another are never yielded on their own.
    Statements whose parentheses never close are skipped.

    Args:
        text:
            The text being scanned

        start: (int)
            (Default 0) Offset at which scanning begins

        end: (int)
            (Optional) Offset at which scanning stops

    Yields:
        Statement
    """
    end = len(text) if end is None else end
    pos = start
    while pos < end:
        match = _RE_STATEMENT_HEAD.search(text, pos, end)
        if match is None:
            return

        try:
            statement = _complete_statement(text, match, end)
        except UnbalancedSpanError as exc:
            LOGGER.debug('Skipping %s statement: %s', match.group(1), exc)
            pos = match.end()
            continue

        yield statement
        pos = statement.end
