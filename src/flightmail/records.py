"""
# src/flightmail/records.py
# Turn parse results into storable trip records

Storage itself lives outside this package; these helpers only build the
dicts a document store would persist. The raw email body never ends up in a
record.
"""

import re
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from .parsers.types import ParserResult
from .utils.logger import get_logger

logger = get_logger(__name__)

STATUS_COMPLETE = 'complete'
STATUS_PENDING_REVIEW = 'pending_review'

# Used as the origin when the origin cannot be geocoded
DEFAULT_ORIGIN = {
    'name': 'Washington, DC',
    'lat': 38.9072,
    'lng': -77.0369,
    'country': 'United States',
}

# geocode("CDG") -> {"city": ..., "lat": ..., "lng": ..., "country": ...} or None
Geocoder = Callable[[str], Optional[Dict]]

_BRACKETED_ADDRESS = re.compile(r'<([^>]+)>')


def extract_sender_address(from_header: str) -> str:
    """Return the bare address from 'Name <addr>' or the whole header, lowercased."""
    match = _BRACKETED_ADDRESS.search(from_header or '')
    address = match.group(1) if match else (from_header or '')
    return address.strip().lower()


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _place(geocoded: Optional[Dict]) -> Optional[Dict]:
    if not geocoded:
        return None
    return {
        'name': geocoded.get('city') or geocoded.get('name'),
        'lat': geocoded.get('lat'),
        'lng': geocoded.get('lng'),
        'country': geocoded.get('country', ''),
    }


def build_pending_record(result: ParserResult, subject: str) -> Dict:
    """Placeholder for an email nothing could parse, kept for manual review."""
    now = _now()
    return {
        'name': 'Unknown Destination',
        'country': '',
        'lat': 0,
        'lng': 0,
        'dates': [],
        'status': STATUS_PENDING_REVIEW,
        'missingFields': ['name', 'coordinates', 'dates'],
        'source': 'email',
        'parseError': result.error_message or 'Could not parse flight details',
        'errorKind': result.error.kind.value if result.error else None,
        'parserUsed': result.parser_used,
        'rawSubject': subject,
        'createdAt': now,
        'updatedAt': now,
    }


def build_flight_record(result: ParserResult, subject: str,
                        geocoder: Optional[Geocoder] = None) -> Dict:
    """Build the record to store for one parsed email.

    A record missing destination coordinates or a departure date is still
    stored, flagged as pending review.
    """
    if not result.success or result.flight is None:
        return build_pending_record(result, subject)

    flight = result.flight
    origin = None
    destination = None
    if geocoder is not None:
        origin = _place(geocoder(flight.origin))
        destination = _place(geocoder(flight.destination))
    origin = origin or DEFAULT_ORIGIN

    missing_fields = []
    if destination is None:
        missing_fields.append('coordinates')
    if not flight.departure_date:
        missing_fields.append('dates')
    status = STATUS_PENDING_REVIEW if missing_fields else STATUS_COMPLETE
    logger.debug(f"Record for {flight.origin} -> {flight.destination}: {status}")

    now = _now()
    record = {
        'name': (destination or {}).get('name') or flight.destination,
        'country': (destination or {}).get('country', ''),
        'lat': (destination or {}).get('lat', 0),
        'lng': (destination or {}).get('lng', 0),
        'flewFromName': origin['name'],
        'flewFromLat': origin['lat'],
        'flewFromLng': origin['lng'],
        'isOneWay': flight.is_one_way,
        'dates': [d for d in (flight.departure_date, flight.return_date) if d],
        'status': status,
        'source': 'email',
        'airline': flight.airline,
        'confirmationNumber': flight.confirmation_number,
        'parserUsed': result.parser_used,
        'createdAt': now,
        'updatedAt': now,
    }
    if missing_fields:
        record['missingFields'] = missing_fields
    return record
