"""
# src/flightmail/parsers/generic.py
# Airline-agnostic parser built from the shared field extractors
"""

from typing import Optional

from .extractors import (
    combine_text,
    extract_confirmation,
    extract_dates,
    extract_route,
    is_round_trip,
)
from .types import ParsedFlight, ParseErrorKind, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

PARSER_NAME = 'generic'

BASE_CONFIDENCE = 0.3
ROUTE_BONUS = 0.3
DATE_BONUS = 0.2
CONFIRMATION_BONUS = 0.1


def parse_generic(subject: str, body: str) -> ParserResult:
    """Parse any flight email with the shared patterns.

    A route is mandatory; without one nothing else is worth returning.
    Confidence tops out at 0.9 so a source-specific parser is always
    preferred when one applies.
    """
    full_text = combine_text(subject, body)

    route = extract_route(full_text)
    if route is None:
        logger.debug("Generic parser found no route")
        return ParserResult.fail(ParseErrorKind.NO_ROUTE, 'Could not extract flight route', PARSER_NAME)
    if not route.labeled:
        logger.debug(f"Generic route {route.origin} -> {route.destination} is a bare code guess")

    dates = extract_dates(full_text)
    round_trip = is_round_trip(full_text, dates)
    confirmation = extract_confirmation(full_text)

    confidence = BASE_CONFIDENCE
    if route.origin and route.destination:
        confidence += ROUTE_BONUS
    if dates:
        confidence += DATE_BONUS
    if confirmation:
        confidence += CONFIRMATION_BONUS

    flight = ParsedFlight(
        origin=route.origin,
        destination=route.destination,
        departure_date=dates[0] if dates else None,
        return_date=dates[1] if round_trip and len(dates) >= 2 else None,
        is_one_way=not round_trip,
        confirmation_number=confirmation,
        confidence=round(confidence, 2),
    )
    return ParserResult.ok(flight, PARSER_NAME)


def parse_generic_for_source(subject: str, body: str, source: str,
                             airline: str, confirmation: Optional[str] = None) -> ParserResult:
    """Run the generic parser on behalf of a source parser whose own patterns missed.

    The source's airline always replaces whatever the generic result had, and
    its own confirmation number wins when it found one.
    """
    result = parse_generic(subject, body)
    if not result.success or result.flight is None:
        return result

    logger.debug(f"{source} parser fell back to generic")
    flight = result.flight.replace(
        airline=airline,
        confirmation_number=confirmation or result.flight.confirmation_number,
    )
    return result.with_flight(flight).with_parser(f"{source}-generic")
