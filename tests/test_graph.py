import random

import pytest

from tsp_eval import (
    CityIdentifierError,
    EmptyInputError,
    Location,
    TourEvaluator,
    city_graph,
    compute_tour_distance,
    graph_tour_length,
)


def test_city_graph_is_complete_and_one_based():
    cities = [Location(0, 0), Location(3, 0), Location(0, 4)]
    graph = city_graph(cities)
    assert sorted(graph.nodes()) == [1, 2, 3]
    assert graph.number_of_edges() == 3
    assert graph.nodes[2]["pos"] == (3.0, 0.0)
    assert graph[2][3]["weight"] == pytest.approx(5.0)


def test_graph_length_matches_scalar():
    rng = random.Random(11)
    cities = [Location(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(15)]
    tour = list(range(1, 16))
    rng.shuffle(tour)
    graph = TourEvaluator(cities).graph()
    assert graph_tour_length(graph, tour) == pytest.approx(
        compute_tour_distance(tour, cities), abs=1e-9
    )


def test_graph_length_single_city():
    graph = city_graph([(1, 1)])
    assert graph_tour_length(graph, [1]) == 0.0


def test_graph_length_errors():
    graph = city_graph([(0, 0), (5, 0)])
    with pytest.raises(CityIdentifierError):
        graph_tour_length(graph, [1, 3])
    with pytest.raises(EmptyInputError):
        graph_tour_length(graph, [])
    with pytest.raises(EmptyInputError):
        city_graph([])
