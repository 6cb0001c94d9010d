# conn3d/plot.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

from .geom import Pt, as_points, unique_points
from .edges import Edge
from .forest import ComponentForest
from .constants import DEFAULT_PAIR_LIMIT


def circuit_labels(points: Iterable, edges: Sequence[Edge], limit: int = DEFAULT_PAIR_LIMIT) -> Dict[Pt, int]:
    """
    Мітка компоненти для кожної точки після `limit` ребер.
    Явні компоненти нумеруємо першими, одиночки отримують наступні номери.
    """
    if limit < 0:
        raise ValueError(f"limit має бути невід'ємним, отримано: {limit}")
    forest = ComponentForest()
    forest.apply_all(edges[:limit])
    labels: Dict[Pt, int] = {}
    for ci, comp in enumerate(forest.components):
        for p in comp:
            labels[p] = ci
    nxt = len(forest.components)
    for p in unique_points(as_points(points)):
        if p not in labels:
            labels[p] = nxt
            nxt += 1
    return labels


def plot_circuits(
    points: Iterable,
    edges: Sequence[Edge],
    path: Union[str, Path],
    limit: int = DEFAULT_PAIR_LIMIT,
    title: str = "",
) -> Path:
    """
    3D-діаграма: кожна компонента своїм кольором, застосовані ребра - відрізками.
    Зберігає PNG у `path` (бекенд Agg, без вікна).
    """
    try:
        from matplotlib.backends.backend_agg import FigureCanvasAgg
        from matplotlib.figure import Figure
        from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'
    except ImportError as e:
        raise RuntimeError("для малювання потрібен matplotlib; встанови його") from e

    labels = circuit_labels(points, edges, limit)
    pts: List[Pt] = list(labels)

    fig = Figure(figsize=(8, 8))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111, projection="3d")

    for a, b in edges[:limit]:
        ax.plot([a.x, b.x], [a.y, b.y], [a.z, b.z], color="0.6", linewidth=0.8)

    if pts:
        ax.scatter(
            [p.x for p in pts],
            [p.y for p in pts],
            [p.z for p in pts],
            c=[labels[p] for p in pts],
            cmap="tab20",
            s=18,
            depthshade=False,
        )

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title or f"Circuits after {min(limit, len(edges))} connections")

    out = Path(path)
    fig.savefig(out, dpi=100)
    return out
