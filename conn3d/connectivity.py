# conn3d/connectivity.py
from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence

from .geom import as_points, unique_points
from .edges import Edge
from .forest import ComponentForest

logger = logging.getLogger(__name__)


def connecting_edge(points: Iterable, edges: Sequence[Edge]) -> Optional[Edge]:
    """
    Застосовує ребра за зростанням відстані, доки одна компонента не охопить
    усі точки. Повертає ребро, що завершило з'єднання.

    None, якщо точок менше двох (з'єднувати нічого) або якщо передана
    послідовність ребер неповна і з'єднання так і не настало.
    """
    n = len(unique_points(as_points(points)))
    if n < 2:
        return None

    forest = ComponentForest()
    for step, edge in enumerate(edges, start=1):
        forest.apply(edge)
        if forest.spans(n):
            logger.debug("all %d points connected after %d edges by %s", n, step, edge)
            return edge

    logger.warning("edge sequence ended before all %d points were connected", n)
    return None


def full_connectivity(points: Iterable, edges: Sequence[Edge]) -> Optional[int]:
    """Добуток x-координат кінців ребра, що з'єднало все; None для N < 2."""
    edge = connecting_edge(points, edges)
    if edge is None:
        return None
    return edge.checksum()
