from flightmail.parsers.detector import detect_source
from flightmail.parsers.sources import STRATEGIES, Source, get_strategy
from flightmail.parsers.united import parse_united


def test_detect_airline_from_sender():
    assert detect_source("reservations@united.com", "Your trip", "") is Source.UNITED
    assert detect_source("no-reply@aa.com", "", "") is Source.AMERICAN


def test_detect_is_case_insensitive():
    assert detect_source("", "YOUR RYANAIR BOOKING", "") is Source.RYANAIR


def test_portal_wins_over_mentioned_airline():
    body = "Chase Travel\nYour United Airlines flight is confirmed"

    assert detect_source("travel@example.org", "Trip booked", body) is Source.CHASE


def test_detect_portals():
    assert detect_source("", "", "Manage at booking.com") is Source.BOOKING
    assert detect_source("", "", "Powered by Google Flights") is Source.GOOGLE


def test_detect_unknown_sender():
    assert detect_source("friend@example.org", "Lunch?", "See you at noon") is None
    assert detect_source(None, None, None) is None


def test_registry_lookup():
    assert get_strategy(Source.UNITED) is parse_united
    assert get_strategy(None) is None


def test_sources_without_parser_use_generic():
    for source in (Source.EXPEDIA, Source.DELTA, Source.JETBLUE, Source.AVIANCA):
        assert source not in STRATEGIES
        assert get_strategy(source) is None
