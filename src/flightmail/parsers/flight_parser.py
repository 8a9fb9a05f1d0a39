"""
# src/flightmail/parsers/flight_parser.py
# Entry point for extracting a flight itinerary from one email
"""

from typing import Callable, Dict, Optional

from .detector import detect_source
from .generic import parse_generic
from .sources import get_strategy
from .types import ParseError, ParseErrorKind, ParserResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_CONFIDENCE_THRESHOLD = 0.7
GENERIC_CONFIDENCE_THRESHOLD = 0.6

ModelFallback = Callable[[str, str, str], ParserResult]


def _default_model_fallback(from_addr: str, subject: str, body: str) -> ParserResult:
    from ..llm.extractor import parse_with_model
    return parse_with_model(from_addr, subject, body)


def stage_rejection(result: ParserResult, threshold: float) -> Optional[ParseError]:
    """Why a stage result is not good enough to return, or None when it is.

    A low-confidence success is rejected with LOW_CONFIDENCE and its flight
    is discarded; it is never merged into a later stage.
    """
    if not result.success or result.flight is None:
        return result.error or ParseError(ParseErrorKind.NO_ROUTE, "No flight extracted")
    if result.flight.confidence < threshold:
        return ParseError(ParseErrorKind.LOW_CONFIDENCE,
                          f"Confidence {result.flight.confidence} below {threshold}")
    return None


def parse_flight_email(from_addr: str, subject: str, body: str,
                       model_fallback: Optional[ModelFallback] = None) -> ParserResult:
    """Extract flight information from email content.

    Stages run in order and stop at the first good-enough result:
    source-specific parser (>= 0.7), generic parser (>= 0.6), then the model
    fallback, whose result is returned as-is. Never raises for an email that
    simply does not contain an itinerary.
    """
    logger.debug(f"Processing email with subject: {subject}")
    logger.debug(f"From address: {from_addr}")

    source = detect_source(from_addr, subject, body)
    strategy = get_strategy(source)
    if strategy is not None:
        logger.debug(f"Using {source.value} parser")
        result = strategy(subject, body)
        rejection = stage_rejection(result, SOURCE_CONFIDENCE_THRESHOLD)
        if rejection is None:
            return result
        logger.debug(f"{source.value} parser not accepted ({rejection.kind.value}: {rejection}), trying generic")

    result = parse_generic(subject, body)
    rejection = stage_rejection(result, GENERIC_CONFIDENCE_THRESHOLD)
    if rejection is None:
        return result
    logger.debug(f"Generic parser not accepted ({rejection.kind.value}: {rejection})")

    fallback = model_fallback or _default_model_fallback
    return fallback(from_addr, subject, body)


def parse_email(email: Dict, model_fallback: Optional[ModelFallback] = None) -> ParserResult:
    """Parse a stored email dict with 'from', 'subject' and 'body' keys."""
    return parse_flight_email(
        email.get('from', '') or '',
        email.get('subject', '') or '',
        email.get('body', '') or '',
        model_fallback=model_fallback,
    )


def format_flight_details(result: ParserResult) -> str:
    """Format a parse result for display"""
    if not result.success or result.flight is None:
        return f"""Parser: {result.parser_used}
Error: {result.error_message}"""

    flight = result.flight
    trip = 'One way' if flight.is_one_way else 'Round trip'
    return f"""Route: {flight.origin} -> {flight.destination} ({trip})
Airline: {flight.airline or 'n/a'}
Departure: {flight.departure_date or 'n/a'}
Return: {flight.return_date or 'n/a'}
Confirmation: {flight.confirmation_number or 'n/a'}
Confidence: {flight.confidence:.2f}
Parser: {result.parser_used}"""
