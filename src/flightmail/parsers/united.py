"""
# src/flightmail/parsers/united.py
# United Airlines confirmation emails
"""

import re

from .extractors import CITY, EN_MONTH, combine_text, date_from_groups, first_valid_pair, is_round_trip
from .generic import parse_generic_for_source
from .types import ParsedFlight, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'united'
AIRLINE = 'United Airlines'
CONFIDENCE = 0.85

CONFIRMATION_PATTERN = re.compile(
    r'(?i:\bconfirmation(?:[ \t]+(?:number|code))?)[ \t]*[:#]?[ \t]*#?[ \t]*([A-Z0-9]{6})\b'
)

# "Washington, DC (IAD) to Paris (CDG)"
ROUTE_PATTERN = re.compile(
    r'(' + CITY + r')\s*\(([A-Z]{3})\)\s*(?:(?i:to)|→)\s*(' + CITY + r')\s*\(([A-Z]{3})\)'
)

# "Mon, Jan 15, 2024"
DATE_PATTERN = re.compile(
    r'\b(?:mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?,?\s+' + EN_MONTH + r'\.?\s+(\d{1,2}),?\s+(\d{4})(?!\d)',
    re.IGNORECASE,
)


def parse_united(subject: str, body: str) -> ParserResult:
    full_text = combine_text(subject, body)

    confirm_match = CONFIRMATION_PATTERN.search(full_text)
    confirmation = confirm_match.group(1) if confirm_match else None

    dates = sorted({
        parsed for parsed in (date_from_groups(m.groups(), 'Mdy') for m in DATE_PATTERN.finditer(full_text))
        if parsed
    })

    route = first_valid_pair(ROUTE_PATTERN, full_text, 2, 4)
    if route is None:
        return parse_generic_for_source(subject, body, PARSER_NAME, AIRLINE, confirmation)

    logger.debug(f"United route {route.origin} -> {route.destination}, dates {dates}")
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
