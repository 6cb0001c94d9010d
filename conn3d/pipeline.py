from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .geom import unique_points
from .edges import Edge, enumerate_edges
from .clusters import circuit_sizes, product_of_largest
from .connectivity import connecting_edge
from .constants import DEFAULT_BACKEND, DEFAULT_PAIR_LIMIT, TOP_CLUSTERS


@dataclass(frozen=True)
class Report:
    """
    Підсумок аналізу:
      points          — кількість різних точок;
      edges           — кількість ребер (N(N-1)/2 по вхідній послідовності);
      largest_product — добуток `top` найбільших компонент;
      sizes           — розміри всіх компонент за спаданням;
      checksum        — добуток x кінців ребра, що з'єднало все, або None.
    """
    points: int
    edges: int
    largest_product: int
    sizes: tuple
    checksum: Optional[int]


def analyze(
    points: Iterable,
    limit: int = DEFAULT_PAIR_LIMIT,
    top: int = TOP_CLUSTERS,
    edges_backend: str = DEFAULT_BACKEND,
    clusters_backend: str = DEFAULT_BACKEND,
    edges: Optional[Sequence[Edge]] = None,
) -> Report:
    """
    Повний пайплайн:
      - будує всі ребра один раз (незмінний кортеж);
      - LargestClusters: `limit` найкоротших ребер -> добуток `top` найбільших компонент;
      - FullConnectivity: усі ребра до повного з'єднання -> контрольний добуток x.

    Обидва запити читають ту саму послідовність з початку і мають власні ліси.
    Готові ребра (з enumerate_edges для тих самих точок) можна передати в `edges`.
    """
    pts = list(points)
    if edges is None:
        edges = enumerate_edges(pts, backend=edges_backend)

    sizes = circuit_sizes(pts, edges, limit, backend=clusters_backend)
    product = product_of_largest(sizes, top)

    edge = connecting_edge(pts, edges)

    return Report(
        points=len(unique_points(pts)),
        edges=len(edges),
        largest_product=product,
        sizes=tuple(sizes),
        checksum=edge.checksum() if edge is not None else None,
    )
