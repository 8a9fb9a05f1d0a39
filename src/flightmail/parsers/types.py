"""
# src/flightmail/parsers/types.py
# Result types shared by every extraction strategy
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional


class ParseErrorKind(str, Enum):
    NO_ROUTE = 'no_route'
    LOW_CONFIDENCE = 'low_confidence'
    BACKEND_UNAVAILABLE = 'backend_unavailable'
    RESPONSE_UNPARSEABLE = 'response_unparseable'
    MISSING_REQUIRED_FIELDS = 'missing_required_fields'


@dataclass(frozen=True)
class ParseError:
    kind: ParseErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ParsedFlight:
    origin: str
    destination: str
    departure_date: Optional[str] = None
    return_date: Optional[str] = None
    is_one_way: bool = True
    airline: Optional[str] = None
    confirmation_number: Optional[str] = None
    confidence: float = 0.0

    def replace(self, **changes) -> 'ParsedFlight':
        return replace(self, **changes)

    def to_dict(self) -> Dict:
        data = {
            'origin': self.origin,
            'destination': self.destination,
            'departureDate': self.departure_date,
            'returnDate': self.return_date,
            'isOneWay': self.is_one_way,
            'airline': self.airline,
            'confirmationNumber': self.confirmation_number,
            'confidence': self.confidence,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class ParserResult:
    """Outcome of one strategy attempt.

    A failed parse is an ordinary value, not an exception: callers branch on
    ``success`` and, when they need to, on ``error.kind``.
    """
    success: bool
    parser_used: str
    flight: Optional[ParsedFlight] = None
    error: Optional[ParseError] = None

    @classmethod
    def ok(cls, flight: ParsedFlight, parser_used: str) -> 'ParserResult':
        if not flight.origin or not flight.destination:
            raise ValueError('A successful parse needs both origin and destination')
        return cls(success=True, parser_used=parser_used, flight=flight)

    @classmethod
    def fail(cls, kind: ParseErrorKind, message: str, parser_used: str) -> 'ParserResult':
        return cls(success=False, parser_used=parser_used, error=ParseError(kind, message))

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error else None

    @property
    def confidence(self) -> float:
        return self.flight.confidence if self.flight else 0.0

    def with_parser(self, parser_used: str) -> 'ParserResult':
        return replace(self, parser_used=parser_used)

    def with_flight(self, flight: ParsedFlight) -> 'ParserResult':
        return replace(self, flight=flight)

    def to_dict(self) -> Dict:
        data = {'success': self.success, 'parserUsed': self.parser_used}
        if self.flight is not None:
            data['flight'] = self.flight.to_dict()
        if self.error is not None:
            data['error'] = self.error.message
            data['errorKind'] = self.error.kind.value
        return data
