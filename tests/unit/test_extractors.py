import pytest

from flightmail.parsers.extractors import (
    Route,
    combine_text,
    expand_two_digit_year,
    extract_confirmation,
    extract_dates,
    extract_route,
    is_round_trip,
    normalize_date,
)


@pytest.mark.parametrize(
    "text",
    [
        "Departure: 01/15/2024",
        "Departure: 1-15-2024",
        "Departure: January 15, 2024",
        "Departure: Jan. 15 2024",
        "Departure: Monday, January 15th, 2024",
        "Departure: 15 January 2024",
        "Departure: 15 de enero de 2024",
        "Departure: 2024-01-15",
        "Departure: Mon, 15 Jan 24",
        "Departure: 01/15/24",
    ],
)
def test_extract_dates_supported_formats(text):
    assert extract_dates(text) == ["2024-01-15"]


def test_extract_dates_spanish_months():
    assert extract_dates("Salida: 5 de marzo de 2024") == ["2024-03-05"]
    assert extract_dates("Regreso: 20 dic. 2024") == ["2024-12-20"]


def test_extract_dates_sorted_and_distinct():
    text = "Depart Mar 20, 2024. Return 03/10/2024. Again: 2024-03-20"

    assert extract_dates(text) == ["2024-03-10", "2024-03-20"]


def test_extract_dates_rejects_impossible_dates():
    assert extract_dates("Travel on 02/30/2024 or 13/45/2024") == []


def test_extract_dates_none_found():
    assert extract_dates("No dates in here") == []
    assert extract_dates("") == []


def test_two_digit_year_pivot():
    assert expand_two_digit_year(0) == 2000
    assert expand_two_digit_year(24) == 2024
    assert expand_two_digit_year(50) == 2050
    assert expand_two_digit_year(51) == 1951
    assert expand_two_digit_year(99) == 1999
    assert expand_two_digit_year(2024) == 2024


def test_two_digit_year_in_text():
    assert extract_dates("Thu, 03 Feb 99") == ["1999-02-03"]


def test_normalize_date():
    assert normalize_date(2024, 2, 29) == "2024-02-29"
    assert normalize_date(2023, 2, 29) is None
    assert normalize_date(2024, 0, 1) is None


def test_combine_text():
    assert combine_text("Subject", "Body") == "Subject\nBody"
    assert combine_text(None, None) == "\n"


def test_route_from_to_labels():
    assert extract_route("From: JFK To: LAX") == Route("JFK", "LAX")
    assert extract_route("Your flight from JFK to LAX") == Route("JFK", "LAX")


@pytest.mark.parametrize("text", ["JFK → LAX", "JFK -> LAX", "JFK - LAX", "JFK to LAX"])
def test_route_adjacent_codes(text):
    assert extract_route(text) == Route("JFK", "LAX")


def test_route_depart_arrive_spans_body():
    text = "Departing: BOS\nSeat 12A\nMeal included\nArriving: DEN"

    assert extract_route(text) == Route("BOS", "DEN")


def test_route_city_code():
    assert extract_route("Washington (DCA) to Miami (MIA)") == Route("DCA", "MIA")


def test_route_skips_unregistered_codes():
    text = "From: ABC To: XYZ\nFrom: SEA To: LAX"

    assert extract_route(text) == Route("SEA", "LAX")


def test_route_unregistered_only():
    assert extract_route("Route: XYZ to QQQ") is None


def test_route_same_code_twice_is_not_a_route():
    assert extract_route("SEA - SEA") is None


def test_route_fallback_takes_first_two_codes():
    route = extract_route("Trip summary\nSEA ... LAX ... DEN")

    assert route == Route("SEA", "LAX", labeled=False)


def test_route_fallback_misreads_layover():
    # Connection airports are indistinguishable from destinations in the bare scan
    text = "Leaving IAD, connection in CDG, final stop FCO"

    route = extract_route(text)

    assert route.origin == "IAD"
    assert route.destination == "CDG"
    assert not route.labeled


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Confirmation: ABC123", "ABC123"),
        ("Confirmation number: #ZXCVBN", "ZXCVBN"),
        ("CONFIRMATION NUMBER: ZXCVBN", "ZXCVBN"),
        ("Booking reference: XYZ789", "XYZ789"),
        ("Record locator QWERTY", "QWERTY"),
        ("PNR: K7X2QP", "K7X2QP"),
        ("Código de reserva: ABC12D", "ABC12D"),
        ("Número de confirmación: 7YH3KD", "7YH3KD"),
    ],
)
def test_extract_confirmation(text, expected):
    assert extract_confirmation(text) == expected


def test_extract_confirmation_needs_uppercase_code():
    assert extract_confirmation("Your trip confirmation\nWashington, DC") is None
    assert extract_confirmation("confirmation: abc123") is None


def test_extract_confirmation_skips_heading_words():
    text = "CONFIRMATION DETAILS\nConfirmation code: H4KQ2M"

    assert extract_confirmation(text) == "H4KQ2M"


def test_round_trip_wording_wins_over_one_way():
    assert is_round_trip("Round trip fare. Also available one way.", [])


def test_one_way_wording_wins_over_dates():
    assert not is_round_trip("One-way ticket", ["2024-01-01", "2024-01-05"])


def test_two_dates_mean_round_trip():
    assert is_round_trip("Itinerary", ["2024-01-01", "2024-01-05"])


def test_return_keyword_means_round_trip():
    assert is_round_trip("Returning flight details below", ["2024-01-01"])


def test_roundtrip_spellings():
    assert is_round_trip("ROUNDTRIP", [])
    assert is_round_trip("round-trip", [])


def test_no_signal_is_one_way():
    assert not is_round_trip("Flight details", ["2024-01-01"])


def test_extract_confirmation_stays_on_label_line():
    assert extract_confirmation("Flight confirmation\nSEATTLE (SEA) to LOS ANGELES (LAX)") is None
    assert extract_confirmation("Booking reference\nLONDON") is None
