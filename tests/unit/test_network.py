from __future__ import annotations

from railfinder.domain.algorithms.network import build_stop_graph, busiest_interchanges
from railfinder.domain.models import RouteStop, StationInfo, Train


def _train(number: str, *codes: str) -> Train:
    return Train(
        train_number=number,
        train_name=f"Train {number}",
        source=codes[0],
        destination=codes[-1],
        departure_time="06:00",
        arrival_time="18:00",
        duration="12h 00m",
        stations=tuple(RouteStop(code=c, name=f"{c} Junction") for c in codes),
    )


def test_stop_graph_links_consecutive_stops() -> None:
    graph = build_stop_graph(
        [_train("1", "AAA", "HUB", "BBB"), _train("2", "AAA", "HUB")]
    )

    assert set(graph.nodes) == {"AAA", "HUB", "BBB"}
    assert graph.nodes["HUB"]["name"] == "HUB Junction"
    assert graph["AAA"]["HUB"]["trains"] == ["1", "2"]
    assert not graph.has_edge("HUB", "AAA")


def test_busiest_interchanges_ranks_by_degree_then_code() -> None:
    trains = [
        _train("1", "AAA", "HUB", "BBB"),
        _train("2", "ZZZ", "HUB", "WWW"),
        _train("3", "AAA", "BBB"),
    ]

    assert busiest_interchanges(trains, limit=1) == (
        StationInfo(code="HUB", name="HUB Junction"),
    )
    runners_up = busiest_interchanges(trains, limit=2, exclude={"HUB"})
    assert [s.code for s in runners_up] == ["AAA", "BBB"]


def test_busiest_interchanges_on_empty_catalog() -> None:
    assert busiest_interchanges([]) == ()
