import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import networkx as nx
import numpy as np
import torch

from .base import (
    CityIdentifierError,
    CityTable,
    EmptyInputError,
    Location,
    as_city_table,
    check_tour,
    euclidean,
    tour_edges,
)
from .graph import city_graph

logger = logging.getLogger(__name__)


@dataclass
class EvaluationConfig:
    device: str = "cpu"
    dtype: torch.dtype = torch.float64
    chunk_size: int = 4096

    def __post_init__(self):
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1.")


def _as_locations(cities) -> CityTable:
    if all(isinstance(c, Location) for c in cities):
        return cities
    return as_city_table(cities)


def compute_tour_distance(tour: Iterable[int], cities: CityTable) -> float:
    """Total Euclidean length of the closed tour over ``cities``.

    ``tour`` holds 1-based city identifiers; identifier ``k`` is ``cities[k - 1]``.
    The edge from the last city back to the first is included.

    Raises:
        EmptyInputError: ``tour`` or ``cities`` is empty.
        CityIdentifierError: an identifier is outside ``[1, len(cities)]``.
    """
    tour = list(tour)
    cities = _as_locations(cities)
    check_tour(tour, len(cities))
    dist = 0.0
    for a, b in tour_edges(tour):
        dist += euclidean(cities[a - 1], cities[b - 1])
    return float(dist)


def _coordinate_tensor(cities, cfg: EvaluationConfig) -> torch.Tensor:
    if torch.is_tensor(cities):
        coords = cities.to(device=cfg.device, dtype=cfg.dtype)
    elif isinstance(cities, np.ndarray):
        coords = torch.tensor(np.array(cities, dtype=np.float64), device=cfg.device, dtype=cfg.dtype)
    else:
        table = as_city_table(cities)
        coords = torch.tensor([[c.x, c.y] for c in table], device=cfg.device, dtype=cfg.dtype)
    if coords.dim() != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected (n, 2) coordinates, got shape {tuple(coords.shape)}.")
    if coords.shape[0] == 0:
        raise EmptyInputError("City table is empty.")
    return coords


def batch_tour_distances(tours, cities, config: Optional[EvaluationConfig] = None) -> torch.Tensor:
    """Score a ``(B, n)`` batch of 1-based tours over one city table.

    Returns a ``(B,)`` tensor; row ``i`` equals ``compute_tour_distance(tours[i], cities)``.
    """
    cfg = config or EvaluationConfig()
    coords = _coordinate_tensor(cities, cfg)
    idx = torch.as_tensor(tours, device=cfg.device)
    if idx.dim() != 2:
        raise ValueError(f"Expected a 2-D batch of tours, got shape {tuple(idx.shape)}.")
    if idx.shape[0] == 0 or idx.shape[1] == 0:
        raise EmptyInputError("Tour batch is empty.")
    if idx.is_floating_point() or idx.is_complex() or idx.dtype == torch.bool:
        raise TypeError(f"Tour identifiers must be integers, got {idx.dtype}.")
    n = coords.shape[0]
    out_of_range = (idx < 1) | (idx > n)
    if out_of_range.any():
        row, col = out_of_range.nonzero()[0].tolist()
        raise CityIdentifierError(
            f"City identifier {idx[row, col].item()} at tour {row}, position {col} "
            f"is outside [1, {n}]."
        )
    idx = idx.long() - 1

    lengths = []
    for start in range(0, idx.shape[0], cfg.chunk_size):
        chunk = idx[start : start + cfg.chunk_size]
        pts = coords[chunk]
        # Rolling by one pairs each city with its predecessor; slot 0 gets the closing edge.
        prev = pts.roll(1, dims=1)
        lengths.append((pts - prev).pow(2).sum(dim=-1).sqrt().sum(dim=-1))
        logger.debug("scored tours %d-%d of %d", start, start + chunk.shape[0], idx.shape[0])
    return torch.cat(lengths)


class TourEvaluator:
    """Scores tours against one fixed city table."""

    def __init__(self, cities, config: Optional[EvaluationConfig] = None):
        self.cities = as_city_table(cities)
        self.config = config or EvaluationConfig()
        coords = np.array([[c.x, c.y] for c in self.cities], dtype=np.float64)
        coords.setflags(write=False)
        self.coordinates = coords
        logger.debug("evaluator ready for %d cities on %s", len(self.cities), self.config.device)

    def __len__(self) -> int:
        return len(self.cities)

    def __call__(self, tour: Iterable[int]) -> float:
        return self.distance(tour)

    def distance(self, tour: Iterable[int]) -> float:
        return compute_tour_distance(tour, self.cities)

    def batch(self, tours) -> torch.Tensor:
        return batch_tour_distances(tours, self.coordinates, self.config)

    def distance_matrix(self) -> np.ndarray:
        diff = self.coordinates[:, None, :] - self.coordinates[None, :, :]
        return np.sqrt((diff * diff).sum(axis=-1))

    def graph(self) -> nx.Graph:
        return city_graph(self.cities)
