"""
# src/flightmail/parsers/chase.py
# Chase Travel booking portal emails

The portal re-formats confirmations from many carriers, so the airline has
to be detected from the body text instead of being fixed.
"""

import re

from .airport_codes import COMMON_WORD_STOPLIST, is_valid_code
from .extractors import EN_MONTH, combine_text, date_from_groups, is_round_trip
from .generic import parse_generic_for_source
from .types import ParsedFlight, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'chase'
UNKNOWN_AIRLINE = 'Unknown Airline'
CONFIDENCE = 0.9
SCAN_CONFIDENCE = 0.75

TRIP_ID_PATTERN = re.compile(r'(?i:\btrip[ \t]*id)[: \t#]*(\d+)')
CONFIRMATION_PATTERN = re.compile(r'(?i:\bairline[ \t]+confirmation)[: \t#]*([A-Z0-9]{5,8})\b')
PAREN_CODE_PATTERN = re.compile(r'\(([A-Z]{3})\)')
RAW_CODE_PATTERN = re.compile(r'\b([A-Z]{3})\b')

# "Feb 26, 2026" / "Thu, Feb 26, 2026"
DATE_PATTERN = re.compile(r'\b' + EN_MONTH + r'\.?\s+(\d{1,2}),?\s+(\d{4})(?!\d)', re.IGNORECASE)
ROUND_TRIP_GLYPHS = ('⇄', '↔')

# Checked in order, first hit wins
AIRLINE_PATTERNS = (
    (re.compile(r'icelandair', re.IGNORECASE), 'Icelandair'),
    (re.compile(r'united\s+airlines', re.IGNORECASE), 'United Airlines'),
    (re.compile(r'american\s+airlines', re.IGNORECASE), 'American Airlines'),
    (re.compile(r'delta\s+air', re.IGNORECASE), 'Delta Air Lines'),
    (re.compile(r'southwest', re.IGNORECASE), 'Southwest Airlines'),
    (re.compile(r'jetblue', re.IGNORECASE), 'JetBlue'),
    (re.compile(r'alaska\s+airlines', re.IGNORECASE), 'Alaska Airlines'),
    (re.compile(r'spirit\s+airlines', re.IGNORECASE), 'Spirit Airlines'),
    (re.compile(r'frontier', re.IGNORECASE), 'Frontier Airlines'),
    (re.compile(r'british\s+airways', re.IGNORECASE), 'British Airways'),
    (re.compile(r'lufthansa', re.IGNORECASE), 'Lufthansa'),
    (re.compile(r'air\s+france', re.IGNORECASE), 'Air France'),
    (re.compile(r'\bklm\b', re.IGNORECASE), 'KLM'),
)


def detect_airline(text: str) -> str:
    for pattern, name in AIRLINE_PATTERNS:
        if pattern.search(text or ''):
            return name
    return UNKNOWN_AIRLINE


def _distinct_valid(codes):
    found = []
    for code in codes:
        if code in COMMON_WORD_STOPLIST or not is_valid_code(code):
            continue
        if code not in found:
            found.append(code)
    return found


def parse_chase(subject: str, body: str) -> ParserResult:
    full_text = combine_text(subject, body)

    trip_match = TRIP_ID_PATTERN.search(full_text)
    if trip_match:
        logger.debug(f"Chase trip ID: {trip_match.group(1)}")

    confirm_match = CONFIRMATION_PATTERN.search(full_text)
    confirmation = confirm_match.group(1) if confirm_match else None
    airline = detect_airline(full_text)

    dates = sorted({
        parsed for parsed in (date_from_groups(m.groups(), 'Mdy') for m in DATE_PATTERN.finditer(full_text))
        if parsed
    })

    # "Washington (IAD)" ... "(KEF)" in itinerary order
    codes = _distinct_valid(PAREN_CODE_PATTERN.findall(full_text))
    confidence = CONFIDENCE
    if len(codes) < 2:
        codes = _distinct_valid(RAW_CODE_PATTERN.findall(full_text))
        confidence = SCAN_CONFIDENCE
        logger.debug(f"Chase raw code scan: {codes}")

    if len(codes) < 2:
        logger.debug("Chase parser could not find airport codes")
        return parse_generic_for_source(subject, body, PARSER_NAME, airline, confirmation)

    round_trip = any(glyph in full_text for glyph in ROUND_TRIP_GLYPHS) or is_round_trip(full_text, dates)
    flight = ParsedFlight(
        origin=codes[0],
        destination=codes[1],
        departure_date=dates[0] if dates else None,
        # The portal lists the return leg last
        return_date=dates[-1] if round_trip and len(dates) >= 2 else None,
        is_one_way=not round_trip,
        airline=airline,
        confirmation_number=confirmation,
        confidence=confidence,
    )
    return ParserResult.ok(flight, PARSER_NAME)
