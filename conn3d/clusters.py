# conn3d/clusters.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Sequence

from .geom import Pt, as_points, unique_points
from .edges import Edge
from .forest import ComponentForest
from .constants import DEFAULT_BACKEND, DEFAULT_PAIR_LIMIT, TOP_CLUSTERS

logger = logging.getLogger(__name__)


def _sizes_dfs(pts: List[Pt], applied: Sequence[Edge]) -> List[int]:
    """Розміри компонент обходом у глибину з явним стеком (по одній на компоненту)."""
    adj: Dict[Pt, List[Pt]] = {}
    for a, b in applied:
        adj.setdefault(a, []).append(b)
        adj.setdefault(b, []).append(a)

    visited = set()
    sizes: List[int] = []
    for start in pts:
        if start in visited:
            continue
        count = 0
        stack = [start]
        while stack:
            p = stack.pop()
            if p in visited:
                continue
            visited.add(p)
            count += 1
            stack.extend(adj.get(p, ()))
        sizes.append(count)
    return sizes


def _sizes_scipy(pts: List[Pt], applied: Sequence[Edge]) -> List[int]:
    try:
        import numpy as np
        from scipy.sparse import coo_matrix
        from scipy.sparse.csgraph import connected_components
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або використай backend='python'."
        ) from e

    if not pts:
        return []
    index = {p: i for i, p in enumerate(pts)}
    rows = np.array([index[e.a] for e in applied], dtype=np.int64)
    cols = np.array([index[e.b] for e in applied], dtype=np.int64)
    data = np.ones(len(applied), dtype=np.int32)
    graph = coo_matrix((data, (rows, cols)), shape=(len(pts), len(pts)))

    _, labels = connected_components(graph, directed=False)
    return [int(n) for n in np.bincount(labels) if n > 0]


def circuit_sizes(
    points: Iterable,
    edges: Sequence[Edge],
    limit: int = DEFAULT_PAIR_LIMIT,
    backend: str = DEFAULT_BACKEND,
) -> List[int]:
    """
    Застосувати перші min(limit, len(edges)) ребер і повернути розміри всіх
    компонент (включно з незачепленими одиночками), за спаданням.
    Сума розмірів дорівнює кількості різних точок.
    """
    if limit < 0:
        raise ValueError(f"limit має бути невід'ємним, отримано: {limit}")
    pts = unique_points(as_points(points))
    applied = edges[:limit]

    # окремий ліс на кожен запит: жодного спільного стану з FullConnectivity
    forest = ComponentForest()
    joined = forest.apply_all(applied)
    logger.debug("applied %d edges (%d joined something), %d explicit circuits",
                 len(applied), joined, len(forest))

    # розміри рахує обхід суміжності; ліс лише перевіряє результат
    name = backend.lower()
    if name == "python":
        sizes = _sizes_dfs(pts, applied)
    elif name == "scipy":
        sizes = _sizes_scipy(pts, applied)
    else:
        raise ValueError(f"Невідомий backend для компонент: {backend}")

    sizes.sort(reverse=True)
    assert sum(sizes) == len(pts)
    assert sizes == sorted(forest.sizes(pts), reverse=True)
    return sizes


def largest_clusters(
    points: Iterable,
    edges: Sequence[Edge],
    limit: int = DEFAULT_PAIR_LIMIT,
    top: int = TOP_CLUSTERS,
    backend: str = DEFAULT_BACKEND,
) -> int:
    """
    Добуток розмірів `top` найбільших компонент після `limit` найкоротших ребер.
    Відсутні компоненти дають множник 1.
    """
    return product_of_largest(circuit_sizes(points, edges, limit, backend), top)


def product_of_largest(sizes: Sequence[int], top: int = TOP_CLUSTERS) -> int:
    if top < 0:
        raise ValueError(f"top має бути невід'ємним, отримано: {top}")
    result = 1
    for n in sorted(sizes, reverse=True)[:top]:
        result *= n
    return result
