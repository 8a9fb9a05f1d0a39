"""
# src/flightmail/parsers/detector.py
# Decide which source-specific parser should see an email first
"""

from typing import Optional

from .sources import Source
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Order matters. Portal emails mention the carrier ("your United flight"), so
# every portal fingerprint is checked before any airline fingerprint.
FINGERPRINTS = (
    # Booking portals / agencies
    (Source.CHASE, ('chase travel', 'chasetravel.com', 'chase.com/travel', 'trip id',
                    'travel reservation center')),
    (Source.EXPEDIA, ('expedia.com',)),
    (Source.KAYAK, ('kayak.com',)),
    (Source.GOOGLE, ('google.com/travel', 'google flights')),
    (Source.BOOKING, ('booking.com',)),
    (Source.PRICELINE, ('priceline.com',)),
    # Airlines
    (Source.RYANAIR, ('ryanair.com', 'ryanair')),
    (Source.AVIANCA, ('avianca.com', 'avianca')),
    (Source.UNITED, ('united.com', 'united airlines')),
    (Source.AMERICAN, ('aa.com', 'american airlines')),
    (Source.SOUTHWEST, ('southwest.com', 'southwest airlines')),
    (Source.SPIRIT, ('spirit.com', 'spirit airlines')),
    (Source.FRONTIER, ('flyfrontier.com', 'frontier airlines')),
    (Source.DELTA, ('delta.com', 'delta air')),
    (Source.ICELANDAIR, ('icelandair.com', 'icelandair')),
    (Source.JETBLUE, ('jetblue.com', 'jetblue')),
)


def detect_source(from_addr: str, subject: str, body: str) -> Optional[Source]:
    """Return the first source whose fingerprint appears in sender, subject or body."""
    content = f"{from_addr or ''} {subject or ''} {body or ''}".lower()

    for source, keywords in FINGERPRINTS:
        if any(keyword in content for keyword in keywords):
            logger.debug(f"Detected source: {source.value}")
            return source

    return None
