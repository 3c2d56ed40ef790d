from __future__ import annotations

from typing import Iterable

import networkx as nx

from railfinder.domain.models import StationInfo, Train


def build_stop_graph(trains: Iterable[Train]) -> nx.DiGraph:
    """Directed graph of consecutive stops; edge `trains` lists train numbers."""

    graph = nx.DiGraph()
    for train in trains:
        for a, b in zip(train.stations, train.stations[1:]):
            graph.add_node(a.code, name=a.name)
            graph.add_node(b.code, name=b.name)
            if graph.has_edge(a.code, b.code):
                graph[a.code][b.code]["trains"].append(train.train_number)
            else:
                graph.add_edge(a.code, b.code, trains=[train.train_number])
    return graph


def busiest_interchanges(
    trains: Iterable[Train], *, limit: int = 4, exclude: Iterable[str] = ()
) -> tuple[StationInfo, ...]:
    """Stations with the most distinct neighbours in the stop graph.

    Ties are broken by station code so the result is deterministic.
    """

    graph = build_stop_graph(trains)
    if graph.number_of_nodes() == 0:
        return ()

    excluded = set(exclude)
    centrality = nx.degree_centrality(graph)
    ranked = sorted(
        (code for code in graph.nodes if code not in excluded),
        key=lambda code: (-centrality[code], code),
    )

    return tuple(
        StationInfo(code=code, name=str(graph.nodes[code].get("name") or code))
        for code in ranked[: max(0, int(limit))]
    )
