from datetime import date

from flight_analytics.analytics.flyers import flight_counts_by_passenger, frequent_flyers
from flight_analytics.models import Flight, Passenger, UnknownPassenger, build_directory

D = date(2017, 1, 1)

PASSENGERS = [Passenger(1, "Ann", "Lee"), Passenger(2, "Bob", "Ray"), Passenger(3, "Cy", "Fox")]


def _flights(pids):
    return [Flight(pid, i, "a", "b", D) for i, pid in enumerate(pids)]


def test_ranking_desc_with_id_tie_break():
    flights = _flights([3, 2, 3, 2, 1, 3])
    report = frequent_flyers(flights, build_directory(PASSENGERS))
    assert [(p.passenger_id, n) for p, n in report.ranking] == [(3, 3), (2, 2), (1, 1)]
    assert report.errors == []


def test_equal_counts_order_by_id():
    flights = _flights([2, 1, 3])
    assert flight_counts_by_passenger(flights) == [(1, 1), (2, 1), (3, 1)]


def test_unknown_passenger_reported_without_aborting(caplog):
    flights = _flights([1, 999, 2, 999, 1])
    report = frequent_flyers(flights, build_directory(PASSENGERS))
    assert [(p.passenger_id, n) for p, n in report.ranking] == [(1, 2), (2, 1)]
    assert report.errors == [UnknownPassenger(999, 2)]
    assert "999" in caplog.text


def test_ranking_is_permutation_and_counts_sum():
    pids = [1, 1, 2, 3, 3, 3, 2, 1, 1]
    flights = _flights(pids)
    report = frequent_flyers(flights, build_directory(PASSENGERS))
    ids = [p.passenger_id for p, _ in report.ranking]
    counts = [n for _, n in report.ranking]
    assert sorted(ids) == sorted(set(pids))
    assert sum(counts) == len(flights)
    assert all(a >= b for a, b in zip(counts, counts[1:]))


def test_idempotent():
    flights = _flights([2, 1, 2, 3])
    directory = build_directory(PASSENGERS)
    assert frequent_flyers(flights, directory) == frequent_flyers(flights, directory)


def test_empty_flights():
    report = frequent_flyers([], build_directory(PASSENGERS))
    assert report.ranking == [] and report.errors == []


def test_int64_max_id_is_ranked_not_reported_unknown():
    big = 2 ** 63 - 1
    directory = build_directory(PASSENGERS + [Passenger(big, "Max", "Id")])
    report = frequent_flyers(_flights([big, 1, big]), directory)
    assert [(p.passenger_id, n) for p, n in report.ranking] == [(big, 2), (1, 1)]
    assert report.errors == []
