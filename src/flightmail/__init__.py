"""
flightmail - extract flight itineraries from confirmation emails
"""

from .parsers.flight_parser import format_flight_details, parse_email, parse_flight_email
from .parsers.types import ParsedFlight, ParseError, ParseErrorKind, ParserResult

__version__ = '0.1.0'

__all__ = [
    'ParsedFlight',
    'ParseError',
    'ParseErrorKind',
    'ParserResult',
    'format_flight_details',
    'parse_email',
    'parse_flight_email',
]
