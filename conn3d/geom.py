from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Pt:
    """Точка (junction box) з невід'ємними цілими координатами."""
    x: int
    y: int
    z: int
    def __iter__(self):
        yield self.x; yield self.y; yield self.z


def distance_sq(a: Pt, b: Pt) -> int:
    """
    Квадрат евклідової відстані, лише цілі числа (без float і втрати точності).
    Різниця береться як max - min по кожній осі, тож завжди >= 0.
    """
    dx = max(a.x, b.x) - min(a.x, b.x)
    dy = max(a.y, b.y) - min(a.y, b.y)
    dz = max(a.z, b.z) - min(a.z, b.z)
    return dx*dx + dy*dy + dz*dz


def as_point(p) -> Pt:
    """
    (x,y,z) -> Pt. Приймаємо лише невід'ємні цілі (bool і float - ні),
    щоб різні вхідні точки не злипалися в одну.
    """
    if isinstance(p, Pt):
        return p
    coords = tuple(p)
    if len(coords) != 3:
        raise ValueError(f"Очікується 3 координати, отримано: {len(coords)}")
    for v in coords:
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise ValueError(f"Координата має бути цілим числом, отримано: {v!r}")
        if v < 0:
            raise ValueError(f"Координата має бути невід'ємною, отримано: {v}")
    return Pt(*(int(v) for v in coords))


def as_points(points: Iterable) -> List[Pt]:
    """Привести (x,y,z)-кортежі до Pt, зберігаючи порядок."""
    return [as_point(p) for p in points]


def unique_points(points: Iterable[Tuple[int, int, int]]) -> List[Pt]:
    """
    Дедуплікація зі збереженням порядку першої появи.
    Точки ототожнюються за значенням, тож дублікати - це одна й та сама вершина.
    """
    seen: dict[Pt, None] = {}
    for p in points:
        seen.setdefault(as_point(p), None)
    return list(seen)
