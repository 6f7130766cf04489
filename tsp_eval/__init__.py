"""
Euclidean tour-length evaluation for TSP candidate solutions over 1-based city tables.
"""

from .base import (
    CityIdentifierError,
    CityTable,
    EmptyInputError,
    Location,
    Tour,
    TourError,
    as_city_table,
    euclidean,
    tour_edges,
)
from .evaluation import (
    EvaluationConfig,
    TourEvaluator,
    batch_tour_distances,
    compute_tour_distance,
)
from .graph import city_graph, graph_tour_length

__all__ = [
    "Location",
    "CityTable",
    "Tour",
    "TourError",
    "EmptyInputError",
    "CityIdentifierError",
    "as_city_table",
    "euclidean",
    "tour_edges",
    "EvaluationConfig",
    "TourEvaluator",
    "batch_tour_distances",
    "compute_tour_distance",
    "city_graph",
    "graph_tour_length",
]
