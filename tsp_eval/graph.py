from itertools import combinations
from typing import Iterable

import networkx as nx

from .base import (
    CityIdentifierError,
    CityTable,
    EmptyInputError,
    as_city_table,
    euclidean,
    tour_edges,
)


def city_graph(cities: CityTable) -> nx.Graph:
    """Complete graph over the city table, nodes labelled by 1-based city identifier."""
    table = as_city_table(cities)
    graph = nx.Graph()
    for ident, loc in enumerate(table, start=1):
        graph.add_node(ident, pos=(loc.x, loc.y))
    for i, j in combinations(range(1, len(table) + 1), 2):
        graph.add_edge(i, j, weight=euclidean(table[i - 1], table[j - 1]))
    return graph


def graph_tour_length(graph: nx.Graph, tour: Iterable[int]) -> float:
    tour = list(tour)
    if len(graph) == 0:
        raise EmptyInputError("Graph has no nodes.")
    if not tour:
        raise EmptyInputError("Tour is empty.")
    for pos, node in enumerate(tour):
        if node not in graph:
            raise CityIdentifierError(f"City {node} at position {pos} is not in the graph.")
    dist = 0.0
    for a, b in tour_edges(tour):
        if a == b:
            continue
        dist += graph[a][b]["weight"]
    return float(dist)
