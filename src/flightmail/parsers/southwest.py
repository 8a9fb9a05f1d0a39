"""
# src/flightmail/parsers/southwest.py
# Southwest Airlines confirmation emails

Southwest prints "DEPARTS City (CODE)" / "ARRIVES City (CODE)" blocks and
often leaves the year off its dates ("Fri, Mar 8").
"""

import re
from datetime import date

from .extractors import CITY, EN_MONTH, combine_text, first_valid_pair, is_round_trip, month_number, normalize_date
from .generic import parse_generic_for_source
from .types import ParsedFlight, ParserResult
from .airport_codes import is_valid_code
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'southwest'
AIRLINE = 'Southwest Airlines'
CONFIDENCE = 0.85

CONFIRMATION_PATTERN = re.compile(r'(?i:\bconfirmation)[ \t]*#?[ \t]*:?[ \t]*([A-Z0-9]{6})\b')

DEPARTS_PATTERN = re.compile(r'(?i:\bdeparts?)[:\s]+' + CITY + r'\s*\(([A-Z]{3})\)')
ARRIVES_PATTERN = re.compile(r'(?i:\barrives?)[:\s]+' + CITY + r'\s*\(([A-Z]{3})\)')
ADJACENT_PATTERN = re.compile(r'\b([A-Z]{3})\s*(?:(?i:to)\b|→|->|–|-)\s*([A-Z]{3})\b')

# "Fri, Mar 8" / "Friday, March 8, 2024"
DATE_PATTERN = re.compile(
    r'\b(?:mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?,?\s+' + EN_MONTH + r'\.?\s+(\d{1,2})\b(?:,?\s+(\d{4})(?!\d))?',
    re.IGNORECASE,
)


def _extract_dates(text: str, default_year: int):
    dates = set()
    for match in DATE_PATTERN.finditer(text):
        month_name, day, year = match.groups()
        parsed = normalize_date(int(year) if year else default_year, month_number(month_name), int(day))
        if parsed:
            dates.add(parsed)
    return sorted(dates)


def _first_valid_code(pattern, text: str):
    for match in pattern.finditer(text):
        if is_valid_code(match.group(1)):
            return match.group(1)
    return None


def parse_southwest(subject: str, body: str) -> ParserResult:
    full_text = combine_text(subject, body)

    confirm_match = CONFIRMATION_PATTERN.search(full_text)
    confirmation = confirm_match.group(1) if confirm_match else None

    # Dates without a year are assumed to be in the current year
    dates = _extract_dates(full_text, date.today().year)

    origin = _first_valid_code(DEPARTS_PATTERN, full_text)
    destination = _first_valid_code(ARRIVES_PATTERN, full_text)
    if not (origin and destination) or origin == destination:
        route = first_valid_pair(ADJACENT_PATTERN, full_text)
        origin, destination = (route.origin, route.destination) if route else (None, None)

    if not (origin and destination):
        return parse_generic_for_source(subject, body, PARSER_NAME, AIRLINE, confirmation)

    logger.debug(f"Southwest route {origin} -> {destination}, dates {dates}")
    round_trip = is_round_trip(full_text, dates)
    flight = ParsedFlight(
        origin=origin,
        destination=destination,
        departure_date=dates[0] if dates else None,
        return_date=dates[1] if round_trip and len(dates) >= 2 else None,
        is_one_way=not round_trip,
        airline=AIRLINE,
        confirmation_number=confirmation,
        confidence=CONFIDENCE,
    )
    return ParserResult.ok(flight, PARSER_NAME)
