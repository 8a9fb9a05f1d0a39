"""
# src/flightmail/parsers/american.py
# American Airlines confirmation emails
"""

import re

from .extractors import EN_MONTH, combine_text, date_from_groups, first_valid_pair, is_round_trip
from .generic import parse_generic_for_source
from .types import ParsedFlight, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'american'
AIRLINE = 'American Airlines'
CONFIDENCE = 0.85

# American calls its 6 character code a record locator
CONFIRMATION_PATTERNS = (
    re.compile(r'(?i:\brecord[ \t]+locator)[ \t]*[:#]?[ \t]*([A-Z0-9]{6})\b'),
    re.compile(r'(?i:\bconfirmation(?:[ \t]+(?:number|code))?)[ \t]*[:#]?[ \t]*#?[ \t]*([A-Z0-9]{6})\b'),
)

# "DFW to LGA", "DFW → LGA", "DFW - LGA"
ROUTE_PATTERN = re.compile(r'\b([A-Z]{3})\s*(?:(?i:to)\b|→|->|–|-)\s*([A-Z]{3})\b')

# "January 15, 2024" / "Jan 15 2024"
DATE_PATTERN = re.compile(r'\b' + EN_MONTH + r'\.?\s+(\d{1,2}),?\s+(\d{4})(?!\d)', re.IGNORECASE)


def _find_confirmation(text: str):
    for pattern in CONFIRMATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def parse_american(subject: str, body: str) -> ParserResult:
    full_text = combine_text(subject, body)
    confirmation = _find_confirmation(full_text)

    dates = sorted({
        parsed for parsed in (date_from_groups(m.groups(), 'Mdy') for m in DATE_PATTERN.finditer(full_text))
        if parsed
    })

    route = first_valid_pair(ROUTE_PATTERN, full_text)
    if route is None:
        return parse_generic_for_source(subject, body, PARSER_NAME, AIRLINE, confirmation)

    logger.debug(f"American route {route.origin} -> {route.destination}, dates {dates}")
    round_trip = is_round_trip(full_text, dates)
    flight = ParsedFlight(
        origin=route.origin,
        destination=route.destination,
        departure_date=dates[0] if dates else None,
        return_date=dates[1] if round_trip and len(dates) >= 2 else None,
        is_one_way=not round_trip,
        airline=AIRLINE,
        confirmation_number=confirmation,
        confidence=CONFIDENCE,
    )
    return ParserResult.ok(flight, PARSER_NAME)
