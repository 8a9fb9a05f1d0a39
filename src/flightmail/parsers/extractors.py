"""
# src/flightmail/parsers/extractors.py
# Stateless field extractors shared by every strategy

Each extractor takes one block of text (subject and body joined by a newline)
and returns candidates or None. Nothing here raises on odd input: a pattern
that does not match just yields no candidate.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from .airport_codes import find_codes_in_text, is_valid_code
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Route:
    origin: str
    destination: str
    # False when the route came from the bare-code scan rather than a labeled pattern
    labeled: bool = True


def combine_text(subject: str, body: str) -> str:
    return f"{subject or ''}\n{body or ''}"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

MONTHS_EN: Dict[str, int] = {
    'jan': 1, 'january': 1, 'feb': 2, 'february': 2, 'mar': 3, 'march': 3,
    'apr': 4, 'april': 4, 'may': 5, 'jun': 6, 'june': 6, 'jul': 7, 'july': 7,
    'aug': 8, 'august': 8, 'sep': 9, 'sept': 9, 'september': 9,
    'oct': 10, 'october': 10, 'nov': 11, 'november': 11, 'dec': 12, 'december': 12,
}

MONTHS_ES: Dict[str, int] = {
    'ene': 1, 'enero': 1, 'feb': 2, 'febrero': 2, 'mar': 3, 'marzo': 3,
    'abr': 4, 'abril': 4, 'may': 5, 'mayo': 5, 'jun': 6, 'junio': 6,
    'jul': 7, 'julio': 7, 'ago': 8, 'agosto': 8, 'sep': 9, 'sept': 9,
    'set': 9, 'septiembre': 9, 'setiembre': 9, 'oct': 10, 'octubre': 10,
    'nov': 11, 'noviembre': 11, 'dic': 12, 'diciembre': 12,
}

EN_MONTH = (
    r'(jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|'
    r'aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)'
)
ES_MONTH = (
    r'(enero|febrero|marzo|abril|mayo|junio|julio|agosto|septiembre|setiembre|'
    r'octubre|noviembre|diciembre|ene|feb|mar|abr|may|jun|jul|ago|sept|sep|set|'
    r'oct|nov|dic)'
)
WEEKDAY = r'(?:(?:mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?,?\s+)?'

# Each entry: (name, compiled pattern, group order). Group order names which
# capture group holds the year, month and day.
DATE_PATTERNS = (
    # MM/DD/YYYY or MM-DD-YYYY
    ('us_numeric', re.compile(r'(?<!\d)(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})(?!\d)'), 'mdy'),
    # Mon DD, YYYY  /  Monday, January 15, 2024  /  Jan. 15 2024
    ('en_month_first', re.compile(
        WEEKDAY + r'\b' + EN_MONTH + r'\.?\s+(\d{1,2})(?:st|nd|rd|th)?,?\s+(\d{4})(?!\d)',
        re.IGNORECASE), 'Mdy'),
    # DD Mon YYYY  /  Thu, 15 January 2024
    ('en_day_first', re.compile(
        WEEKDAY + r'(?<!\d)(\d{1,2})\s+' + EN_MONTH + r'\.?,?\s+(\d{4})(?!\d)',
        re.IGNORECASE), 'dMy'),
    # 15 de enero de 2024  /  15 ene. 2024
    ('es_day_first', re.compile(
        r'(?<!\d)(\d{1,2})\s+(?:de\s+)?' + ES_MONTH + r'\.?\s+(?:de\s+|del\s+)?(\d{4})(?!\d)',
        re.IGNORECASE), 'dSy'),
    # YYYY-MM-DD
    ('iso', re.compile(r'(?<!\d)(\d{4})-(\d{2})-(\d{2})(?!\d)'), 'ymd'),
    # DD Mon YY  /  Thu, 03 Feb 22
    ('en_day_first_short_year', re.compile(
        WEEKDAY + r'(?<!\d)(\d{1,2})\s+' + EN_MONTH + r'\.?,?\s+(\d{2})(?![\d:])',
        re.IGNORECASE), 'dMY'),
    # MM/DD/YY
    ('us_numeric_short_year', re.compile(r'(?<!\d)(\d{1,2})/(\d{1,2})/(\d{2})(?![\d/])'), 'mdY'),
)


def expand_two_digit_year(value: int) -> int:
    """Pivot two-digit years: 00-50 are 20xx, 51-99 are 19xx."""
    if value >= 100:
        return value
    return 2000 + value if value <= 50 else 1900 + value


def normalize_date(year: int, month: int, day: int) -> Optional[str]:
    """Return YYYY-MM-DD for a real calendar date, else None."""
    try:
        return date(int(year), int(month), int(day)).isoformat()
    except (TypeError, ValueError):
        return None


def month_number(name: str, spanish: bool = False) -> Optional[int]:
    key = (name or '').lower().rstrip('.')
    table = MONTHS_ES if spanish else MONTHS_EN
    return table.get(key)


def date_from_groups(groups, order: str) -> Optional[str]:
    year = month = day = None
    for value, slot in zip(groups, order):
        if slot == 'y':
            year = int(value)
        elif slot == 'Y':
            year = expand_two_digit_year(int(value))
        elif slot == 'm':
            month = int(value)
        elif slot == 'M':
            month = month_number(value)
        elif slot == 'S':
            month = month_number(value, spanish=True)
        elif slot == 'd':
            day = int(value)
    if month is None:
        return None
    return normalize_date(year, month, day)


def extract_dates(text: str) -> List[str]:
    """Find every supported date form and return distinct ISO dates, earliest first."""
    dates = []
    for name, pattern, order in DATE_PATTERNS:
        for match in pattern.finditer(text or ''):
            parsed = date_from_groups(match.groups(), order)
            if parsed and parsed not in dates:
                logger.debug(f"Found date {parsed} via {name}: {match.group(0)!r}")
                dates.append(parsed)

    # ISO strings sort chronologically
    return sorted(dates)


# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------

CITY = r"[A-Z][\w.'\-]*(?:[ ,]+[A-Z][\w.'\-]*)*"

# Each entry: (name, compiled pattern, origin group, destination group)
ROUTE_PATTERNS = (
    # From: JFK To: LAX  /  from JFK to LAX
    ('from_to', re.compile(r'(?i:\bfrom)[:\s]+([A-Z]{3})\s+(?i:to)[:\s]+([A-Z]{3})\b'), 1, 2),
    # JFK → LAX  /  JFK -> LAX  /  JFK - LAX  /  JFK to LAX
    ('adjacent', re.compile(r'\b([A-Z]{3})\s*(?:→|->|–|-|(?i:to)\b)\s*([A-Z]{3})\b'), 1, 2),
    # Departing: JFK ... Arriving: LAX
    ('depart_arrive', re.compile(
        r'(?i:\bdepart(?:ing|ure|s)?)[:\s]+([A-Z]{3})\b[\s\S]*?(?i:\barriv(?:ing|al|es)?)[:\s]+([A-Z]{3})\b'), 1, 2),
    # Washington (DCA) to Paris (CDG)
    ('city_code', re.compile(
        r'(' + CITY + r')\s*\(([A-Z]{3})\)\s*(?:(?i:to)|→|->|-)\s*(' + CITY + r')\s*\(([A-Z]{3})\)'), 2, 4),
)


def first_valid_pair(pattern, text: str, origin_group: int = 1,
                     destination_group: int = 2) -> Optional[Route]:
    """First match of ``pattern`` whose two codes are distinct registry codes."""
    for match in pattern.finditer(text or ''):
        origin = match.group(origin_group)
        destination = match.group(destination_group)
        if origin != destination and is_valid_code(origin) and is_valid_code(destination):
            return Route(origin, destination)
    return None


def extract_route(text: str) -> Optional[Route]:
    """Find origin and destination codes.

    Labeled patterns are tried in order, and within a pattern every match is
    tried until both codes are in the registry. If nothing labeled works, the
    first two registry codes in the text are used. That last step cannot tell
    a layover from a destination and is reported with ``labeled=False``.
    """
    text = text or ''
    for name, pattern, origin_group, destination_group in ROUTE_PATTERNS:
        route = first_valid_pair(pattern, text, origin_group, destination_group)
        if route:
            logger.debug(f"Found route {route.origin} -> {route.destination} via {name}")
            return route

    codes = find_codes_in_text(text)
    if len(codes) >= 2:
        logger.debug(f"Route from bare code scan: {codes}")
        return Route(codes[0], codes[1], labeled=False)

    return None


# ---------------------------------------------------------------------------
# Confirmation number
# ---------------------------------------------------------------------------

# Labels match in any case; the code must be uppercase alphanumerics on the
# same line as its label.
CONFIRMATION_PATTERNS = (
    re.compile(r'(?i:\bconfirmation(?:[ \t]+(?:code|number|no\.?))?)[ \t]*[:#]?[ \t]*#?[ \t]*([A-Z0-9]{5,8})\b'),
    re.compile(r'(?i:\bbooking[ \t]+(?:code|reference|number|ref\.?))[ \t]*[:#]?[ \t]*#?[ \t]*([A-Z0-9]{5,8})\b'),
    re.compile(r'(?i:\brecord[ \t]+locator)[ \t]*[:#]?[ \t]*([A-Z0-9]{5,8})\b'),
    re.compile(r'\bPNR[ \t]*[:#]?[ \t]*([A-Z0-9]{6})\b'),
    re.compile(r'(?i:c[oó]digo[ \t]+de[ \t]+reserva)[ \t]*[:#]?[ \t]*([A-Z0-9]{5,8})\b'),
    re.compile(r'(?i:n[uú]mero[ \t]+de[ \t]+confirmaci[oó]n)[ \t]*[:#]?[ \t]*([A-Z0-9]{5,8})\b'),
)


# Uppercase words that follow a label in shouty templates ("CONFIRMATION DETAILS")
CONFIRMATION_NOISE = frozenset({
    'NUMBER', 'DETAILS', 'EMAIL', 'STATUS', 'CODES', 'NUMBERS', 'FLIGHT',
    'RECEIPT', 'TRAVEL', 'BOOKING', 'PLEASE', 'ITINERARY',
})


def is_plausible_code(code: str) -> bool:
    return bool(code) and code not in CONFIRMATION_NOISE


def extract_confirmation(text: str) -> Optional[str]:
    for pattern in CONFIRMATION_PATTERNS:
        for match in pattern.finditer(text or ''):
            code = match.group(1)
            if is_plausible_code(code):
                logger.debug(f"Found confirmation: {code}")
                return code
    return None


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

ROUND_TRIP_PATTERN = re.compile(r'\bround[\s\-]?trip\b', re.IGNORECASE)
ONE_WAY_PATTERN = re.compile(r'\bone[\s\-]?way\b', re.IGNORECASE)
RETURN_PATTERN = re.compile(r'\breturn(?:ing)?\b', re.IGNORECASE)


def is_round_trip(text: str, dates: List[str]) -> bool:
    """Decide round trip vs one way.

    Precedence: explicit "round trip" wording, then explicit "one way"
    wording, then two or more dates, then a "return" keyword.
    """
    text = text or ''
    if ROUND_TRIP_PATTERN.search(text):
        return True
    if ONE_WAY_PATTERN.search(text):
        return False
    if len(dates) >= 2:
        return True
    if RETURN_PATTERN.search(text):
        return True
    return False
