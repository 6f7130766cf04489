import math
import operator
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np


Tour = List[int]


class TourError(ValueError):
    """Base class for tour evaluation failures."""


class EmptyInputError(TourError):
    pass


class CityIdentifierError(TourError, IndexError):
    """A tour references a city identifier outside ``[1, len(cities)]``."""


@dataclass(frozen=True)
class Location:
    x: float
    y: float


CityTable = Sequence[Location]


def euclidean(a: Location, b: Location) -> float:
    dx = b.x - a.x
    dy = b.y - a.y
    return math.sqrt(dx * dx + dy * dy)


def as_city_table(points) -> Tuple[Location, ...]:
    """Normalize locations, ``(x, y)`` pairs or an ``(n, 2)`` array into a city table.

    Slot ``i`` of the returned tuple holds city identifier ``i + 1``.
    """
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) coordinate array, got shape {points.shape}.")
        points = points.tolist()
    table = []
    for p in points:
        if isinstance(p, Location):
            table.append(p)
            continue
        if len(p) != 2:
            raise ValueError(f"Expected a 2-D point, got {p!r}.")
        table.append(Location(float(p[0]), float(p[1])))
    if not table:
        raise EmptyInputError("City table is empty.")
    return tuple(table)


def check_tour(tour: Sequence[int], n_cities: int) -> None:
    if n_cities == 0:
        raise EmptyInputError("City table is empty.")
    if len(tour) == 0:
        raise EmptyInputError("Tour is empty.")
    for pos, city in enumerate(tour):
        if not 1 <= operator.index(city) <= n_cities:
            raise CityIdentifierError(
                f"City identifier {city} at position {pos} is outside [1, {n_cities}]."
            )


def tour_edges(tour: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Yield the edges of the closed tour, closing edge (last -> first) first."""
    n = len(tour)
    if n == 0:
        return
    yield tour[-1], tour[0]
    for i in range(n - 1):
        yield tour[i], tour[i + 1]
