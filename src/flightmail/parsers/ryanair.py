"""
# src/flightmail/parsers/ryanair.py
# Ryanair booking emails

Ryanair lists airports as "Rome (FCO)" with no from/to labels and writes
dates as "Thu, 03 Feb 22".
"""

import re

from .airport_codes import find_codes_in_text, is_valid_code
from .extractors import EN_MONTH, combine_text, date_from_groups, is_round_trip
from .generic import parse_generic_for_source
from .types import ParsedFlight, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'ryanair'
AIRLINE = 'Ryanair'
CONFIDENCE = 0.9
SCAN_CONFIDENCE = 0.8

CONFIRMATION_PATTERN = re.compile(
    r'(?i:\b(?:reservation|booking|confirmation)(?:[ \t]+(?:number|code|reference))?)[ \t]*[:#]?[ \t]*([A-Z0-9]{6})\b'
)
# Bare 6 character reservation codes, e.g. "K7X2QP"
STANDALONE_CODE_PATTERN = re.compile(r'(?<![A-Z0-9])([A-Z0-9]{6})(?![A-Z0-9])')
# "FR8326" is a flight number, not a reservation
FLIGHT_NUMBER_SHAPE = re.compile(r'^[A-Z0-9]{2}\d{3,4}$')
PAREN_CODE_PATTERN = re.compile(r'\(([A-Z]{3})\)')

# "Thu, 03 Feb 22" / "03 Feb 2022"
DATE_PATTERN = re.compile(r'(?<!\d)(\d{1,2})\s+' + EN_MONTH + r'\.?\s+(\d{2}|\d{4})(?![\d:])', re.IGNORECASE)


def is_reservation_code(code: str) -> bool:
    """6 uppercase characters mixing letters and digits."""
    if not code or len(code) != 6 or not code.isupper():
        return False
    if FLIGHT_NUMBER_SHAPE.match(code):
        return False
    return any(c.isalpha() for c in code) and any(c.isdigit() for c in code)


def _find_confirmation(text: str):
    match = CONFIRMATION_PATTERN.search(text)
    if match:
        return match.group(1)
    for match in STANDALONE_CODE_PATTERN.finditer(text):
        if is_reservation_code(match.group(1)):
            return match.group(1)
    return None


def _date_order(match) -> str:
    # Two digit years go through the 19xx/20xx pivot
    return 'dMY' if len(match.group(3)) == 2 else 'dMy'


def _paren_codes(text: str):
    codes = []
    for match in PAREN_CODE_PATTERN.finditer(text):
        code = match.group(1)
        if is_valid_code(code) and code not in codes:
            codes.append(code)
    return codes


def parse_ryanair(subject: str, body: str) -> ParserResult:
    full_text = combine_text(subject, body)
    confirmation = _find_confirmation(full_text)

    dates = sorted({
        parsed for parsed in (date_from_groups(m.groups(), _date_order(m)) for m in DATE_PATTERN.finditer(full_text))
        if parsed
    })

    codes = _paren_codes(full_text)
    confidence = CONFIDENCE
    if len(codes) < 2:
        codes = find_codes_in_text(full_text)
        confidence = SCAN_CONFIDENCE
        logger.debug(f"Ryanair fallback code scan: {codes}")

    if len(codes) < 2:
        return parse_generic_for_source(subject, body, PARSER_NAME, AIRLINE, confirmation)

    origin, destination = codes[0], codes[1]
    logger.debug(f"Ryanair route {origin} -> {destination}, dates {dates}")
    round_trip = is_round_trip(full_text, dates)
    flight = ParsedFlight(
        origin=origin,
        destination=destination,
        departure_date=dates[0] if dates else None,
        return_date=dates[1] if round_trip and len(dates) >= 2 else None,
        is_one_way=not round_trip,
        airline=AIRLINE,
        confirmation_number=confirmation,
        confidence=confidence,
    )
    return ParserResult.ok(flight, PARSER_NAME)
