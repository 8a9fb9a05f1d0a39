"""
# src/flightmail/parsers/sources.py
# Known email sources and the parser registered for each
"""

from enum import Enum
from typing import Callable, Dict, Optional

from .american import parse_american
from .chase import parse_chase
from .ryanair import parse_ryanair
from .southwest import parse_southwest
from .types import ParserResult
from .united import parse_united

Strategy = Callable[[str, str], ParserResult]


class Source(str, Enum):
    # Booking portals / agencies
    CHASE = 'chase'
    EXPEDIA = 'expedia'
    KAYAK = 'kayak'
    GOOGLE = 'google'
    BOOKING = 'booking'
    PRICELINE = 'priceline'
    # Airlines
    RYANAIR = 'ryanair'
    AVIANCA = 'avianca'
    UNITED = 'united'
    AMERICAN = 'american'
    SOUTHWEST = 'southwest'
    SPIRIT = 'spirit'
    FRONTIER = 'frontier'
    DELTA = 'delta'
    ICELANDAIR = 'icelandair'
    JETBLUE = 'jetblue'


# Sources without an entry here go straight to the generic parser
STRATEGIES: Dict[Source, Strategy] = {
    Source.UNITED: parse_united,
    Source.AMERICAN: parse_american,
    Source.SOUTHWEST: parse_southwest,
    Source.RYANAIR: parse_ryanair,
    Source.CHASE: parse_chase,
}


def get_strategy(source: Optional[Source]) -> Optional[Strategy]:
    if source is None:
        return None
    return STRATEGIES.get(source)
