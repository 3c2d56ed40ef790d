from __future__ import annotations

from railfinder.domain.algorithms.ranking import min_fare, sort_trains
from railfinder.domain.models import Train, TrainClassAvailability


def _train(
    number: str,
    *,
    departure: str = "10:00",
    arrival: str = "18:00",
    duration: str = "8h 00m",
    fares: tuple[float, ...] = (500.0,),
) -> Train:
    return Train(
        train_number=number,
        train_name=f"Train {number}",
        source="A",
        destination="B",
        departure_time=departure,
        arrival_time=arrival,
        duration=duration,
        available_classes=tuple(
            TrainClassAvailability(
                code=f"C{i}",
                name=f"Class {i}",
                fare=fare,
                available_seats=1,
                status=TrainClassAvailability.derive_status(1),
            )
            for i, fare in enumerate(fares)
        ),
    )


def _numbers(trains: list[Train]) -> list[str]:
    return [t.train_number for t in trains]


def test_fare_sort_puts_trains_without_classes_last() -> None:
    trains = [
        _train("200", fares=(200.0,)),
        _train("none", fares=()),
        _train("100", fares=(100.0,)),
    ]

    assert _numbers(sort_trains(trains, "fare")) == ["100", "200", "none"]


def test_fare_sort_uses_the_cheapest_class() -> None:
    assert min_fare(_train("x", fares=(900.0, 150.0, 400.0))) == 150.0

    trains = [_train("a", fares=(300.0, 900.0)), _train("b", fares=(1200.0, 250.0))]
    assert _numbers(sort_trains(trains, "fare")) == ["b", "a"]


def test_departure_arrival_and_duration_keys() -> None:
    trains = [
        _train("late", departure="22:15", arrival="06:00", duration="7h 45m"),
        _train("early", departure="05:40", arrival="20:10", duration="14h 30m"),
        _train("noon", departure="12:00", arrival="15:30", duration="3h 30m"),
    ]

    assert _numbers(sort_trains(trains, "departure")) == ["early", "noon", "late"]
    assert _numbers(sort_trains(trains, "arrival")) == ["late", "noon", "early"]
    assert _numbers(sort_trains(trains, "duration")) == ["noon", "late", "early"]


def test_sort_is_stable_and_idempotent() -> None:
    trains = [_train(str(i), departure="09:00") for i in range(5)]
    trains.insert(2, _train("first", departure="06:00"))

    once = sort_trains(trains, "departure")
    twice = sort_trains(once, "departure")

    assert _numbers(once) == ["first", "0", "1", "2", "3", "4"]
    assert _numbers(twice) == _numbers(once)


def test_unknown_key_keeps_input_order() -> None:
    trains = [_train("b"), _train("a")]
    assert _numbers(sort_trains(trains, "platform")) == ["b", "a"]


def test_unparsable_duration_counts_as_zero_and_sorts_first() -> None:
    trains = [
        _train("short", duration="2h 10m"),
        _train("garbled", duration="unknown"),
        _train("long", duration="11h 00m"),
    ]

    assert _numbers(sort_trains(trains, "duration")) == ["garbled", "short", "long"]
