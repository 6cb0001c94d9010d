# conn3d/edges.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .geom import Pt, as_points, distance_sq
from .constants import DEFAULT_BACKEND

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Edge:
    """
    Неорієнтоване ребро між двома точками.
    a: точка, що стоїть раніше у вхідному порядку; b: пізніша.
    distance_sq: квадрат відстані (ціле).
    """
    a: Pt
    b: Pt
    distance_sq: int

    def __iter__(self):
        yield self.a; yield self.b

    def checksum(self) -> int:
        """Добуток x-координат кінців ребра."""
        return self.a.x * self.b.x


def _enumerate_python(pts: List[Pt]) -> List[Edge]:
    edges: List[Edge] = []
    for i, a in enumerate(pts):
        for b in pts[i + 1:]:
            edges.append(Edge(a, b, distance_sq(a, b)))
    # sorted() стабільний: при рівних відстанях лишається порядок (i, j)
    edges.sort(key=lambda e: e.distance_sq)
    return edges


def _enumerate_numpy(pts: List[Pt]) -> List[Edge]:
    try:
        import numpy as np
    except ImportError as e:
        raise RuntimeError(
            "backend='numpy', але NumPy не встановлено. "
            "Встанови numpy або використай backend='python'."
        ) from e

    # зсуваємо кожну вісь до її мінімуму: різниці не змінюються, а числа менші
    coords = [tuple(p) for p in pts]
    mins = [min(c[axis] for c in coords) for axis in range(3)]
    spans = [max(c[axis] for c in coords) - mins[axis] for axis in range(3)]
    if sum(s * s for s in spans) > INT64_MAX:
        raise OverflowError(
            "квадрати відстаней не вміщаються в int64; використай backend='python'"
        )

    arr = np.array(
        [(x - mins[0], y - mins[1], z - mins[2]) for x, y, z in coords],
        dtype=np.int64,
    )
    ii, jj = np.triu_indices(len(pts), k=1)   # рядковий порядок, як у python-варіанті
    diff = arr[ii] - arr[jj]
    d = np.einsum("ij,ij->i", diff, diff)
    order = np.argsort(d, kind="stable")

    return [Edge(pts[int(ii[k])], pts[int(jj[k])], int(d[k])) for k in order]


def enumerate_edges(points: Iterable, backend: str = DEFAULT_BACKEND) -> Tuple[Edge, ...]:
    """
    Всі C(N,2) пар точок, відсортовані за зростанням квадрата відстані.

    Tie-break: стабільне сортування за порядком генерації - пари (i, j), i < j,
    у рядковому порядку індексів вхідної послідовності. Обидва backend-и
    дають ідентичну послідовність.

    Повертає незмінний кортеж; N <= 1 -> порожній кортеж.
    """
    pts = as_points(points)
    if len(pts) < 2:
        return ()

    name = backend.lower()
    if name == "python":
        edges = _enumerate_python(pts)
    elif name == "numpy":
        edges = _enumerate_numpy(pts)
    else:
        raise ValueError(f"Невідомий backend для ребер: {backend}")

    logger.debug("enumerated %d edges for %d points (%s)", len(edges), len(pts), name)
    return tuple(edges)

