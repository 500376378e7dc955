from datetime import date

import pytest

from flight_analytics.models import Flight, Passenger
from flight_analytics.validation import (
    RecordError,
    parse_date,
    parse_flight,
    parse_passenger,
    validate_flights,
    validate_passengers,
)


def test_parse_date_uses_2000_century():
    assert parse_date("05-01-17") == date(2017, 1, 5)
    assert parse_date("31-12-99") == date(2099, 12, 31)
    assert parse_date("01-01-00") == date(2000, 1, 1)


@pytest.mark.parametrize("text", ["2017-01-05", "5-1-17", "31-02-17", "01-13-17", "aa-bb-cc"])
def test_parse_date_rejects_bad_values(text):
    with pytest.raises(RecordError):
        parse_date(text)


def test_parse_passenger_ok_and_strips():
    p = parse_passenger([" 14 ", "Sophia", "Hall "])
    assert p == Passenger(14, "Sophia", "Hall")


@pytest.mark.parametrize("fields,msg", [
    (["1", "A"], "expected 3 fields"),
    (["1", "A", "B", "C"], "expected 3 fields"),
    (["1", "", "B"], "firstName"),
    (["x", "A", "B"], "passengerId is not an integer"),
    (["1.0", "A", "B"], "passengerId is not an integer"),
])
def test_parse_passenger_failures(fields, msg):
    with pytest.raises(RecordError, match=msg):
        parse_passenger(fields)


def test_parse_flight_ok():
    f = parse_flight(["48", "0", "cg", "ir", "01-01-17"])
    assert f == Flight(48, 0, "cg", "ir", date(2017, 1, 1))


def test_parse_flight_tolerates_same_endpoints():
    f = parse_flight(["1", "2", "uk", "uk", "01-01-17"])
    assert f.origin == f.destination == "uk"


@pytest.mark.parametrize("fields,msg", [
    (["48", "0", "cg", "ir"], "expected 5 fields"),
    (["48", "0", "cg", " ", "01-01-17"], "to"),
    (["48", "x", "cg", "ir", "01-01-17"], "flightId is not an integer"),
    (["48", "0", "cg", "ir", "2017-01-01"], "dd-MM-yy"),
])
def test_parse_flight_failures(fields, msg):
    with pytest.raises(RecordError, match=msg):
        parse_flight(fields)


def test_validate_flights_keeps_going_after_bad_rows():
    rows = [
        (2, ["1", "10", "a", "b", "01-01-17"]),
        (3, ["1", "10", "a", "b"]),
        (4, ["2", "11", "b", "c", "02-01-17"]),
    ]
    records, failures = validate_flights(rows, source="flights.csv")
    assert [r.flight_id for r in records] == [10, 11]
    assert len(failures) == 1
    assert failures[0].line_no == 3
    assert failures[0].source == "flights.csv"
    assert failures[0].fields == ("1", "10", "a", "b")


def test_validate_passengers_rejects_duplicate_ids():
    rows = [(2, ["1", "A", "B"]), (3, ["1", "C", "D"]), (4, ["2", "E", "F"])]
    records, failures = validate_passengers(rows)
    assert [p.first_name for p in records] == ["A", "E"]
    assert len(failures) == 1
    assert failures[0].line_no == 3
    assert "duplicate" in failures[0].reason


@pytest.mark.parametrize("text", ["9223372036854775808", "-9223372036854775809", "100000000000000000000"])
def test_parse_flight_rejects_ids_beyond_int64(text):
    with pytest.raises(RecordError, match="out of 64-bit range"):
        parse_flight([text, "1", "a", "b", "01-01-17"])
    with pytest.raises(RecordError, match="out of 64-bit range"):
        parse_flight(["1", text, "a", "b", "01-01-17"])


def test_parse_passenger_accepts_int64_bounds():
    assert parse_passenger(["9223372036854775807", "A", "B"]).passenger_id == 2 ** 63 - 1
    assert parse_passenger(["-9223372036854775808", "A", "B"]).passenger_id == -(2 ** 63)
    assert parse_passenger(["+7", "A", "B"]).passenger_id == 7


@pytest.mark.parametrize("text", ["1_0", "١٢", "1 2", "0x10"])
def test_parse_passenger_rejects_non_ascii_or_underscored_ids(text):
    with pytest.raises(RecordError, match="passengerId is not an integer"):
        parse_passenger([text, "A", "B"])


def test_parse_date_rejects_non_ascii_digits():
    with pytest.raises(RecordError):
        parse_date("٠٥-01-17")


def test_oversized_id_row_becomes_failure_not_crash():
    rows = [
        (2, ["9223372036854775808", "1", "a", "b", "01-01-17"]),
        (3, ["5", "1", "a", "b", "01-01-17"]),
    ]
    records, failures = validate_flights(rows)
    assert [r.passenger_id for r in records] == [5]
    assert [f.line_no for f in failures] == [2]
