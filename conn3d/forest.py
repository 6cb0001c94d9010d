# conn3d/forest.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .geom import Pt

logger = logging.getLogger(__name__)


class ComponentForest:
    """
    Набір попарно неперетинних множин точок (circuits), що зливаються при
    застосуванні ребер.

    Представлення свідомо просте: список множин, які скануємо лінійно на
    кожне ребро (без path compression). Для сотень точок цього досить.
    Точка, якої ще не торкалося жодне ребро, - неявна компонента розміру 1.
    """

    def __init__(self):
        self.components: List[Set[Pt]] = []

    # ---------------- Публічний API ----------------
    def index_of(self, p: Pt) -> Optional[int]:
        """Індекс компоненти, що містить p, або None (точка ще не зачеплена)."""
        for ci, comp in enumerate(self.components):
            if p in comp:
                return ci
        return None

    def component_of(self, p: Pt) -> Set[Pt]:
        """Копія компоненти точки p (для незачепленої - {p})."""
        ci = self.index_of(p)
        if ci is None:
            return {p}
        return set(self.components[ci])

    def apply(self, edge) -> bool:
        """
        Застосувати ребро (a, b):
          - обидві вільні          -> нова компонента {a, b};
          - лише a у Ca            -> b додаємо в Ca;
          - лише b у Cb            -> a додаємо в Cb;
          - різні компоненти       -> компоненту з меншим індексом вливаємо в іншу;
          - та сама компонента     -> нічого (ідемпотентно).
        Повертає True, якщо ребро щось з'єднало, False для no-op.
        """
        a, b = edge
        ai = self.index_of(a)
        bi = self.index_of(b)

        if ai is None and bi is None:
            self.components.append({a, b})
        elif bi is None:
            self.components[ai].add(b)
        elif ai is None:
            self.components[bi].add(a)
        elif ai != bi:
            absorbed, keep = min(ai, bi), max(ai, bi)
            self.components[keep].update(self.components[absorbed])
            del self.components[absorbed]
            logger.debug("merged circuits %d and %d (%d left)", absorbed, keep, len(self.components))
        else:
            return False
        return True

    def apply_all(self, edges: Iterable) -> int:
        """Застосувати ребра по черзі; повертає кількість ребер, що щось з'єднали."""
        return sum(1 for e in edges if self.apply(e))

    def component_sizes(self, points: Iterable[Pt]) -> List[int]:
        """Для кожної точки - розмір її компоненти або 1, якщо точка не зачеплена."""
        size_of: Dict[Pt, int] = {}
        for comp in self.components:
            n = len(comp)
            for p in comp:
                size_of[p] = n
        return [size_of.get(p, 1) for p in points]

    def sizes(self, points: Iterable[Pt]) -> List[int]:
        """Розмір кожної компоненти (по одному на компоненту), включно з одиночками серед points."""
        assigned = set().union(*self.components)
        singles = {p for p in points if p not in assigned}
        return [len(c) for c in self.components] + [1] * len(singles)

    def largest(self) -> int:
        """Розмір найбільшої явної компоненти (0 для порожнього лісу)."""
        return max((len(c) for c in self.components), default=0)

    def spans(self, n: int) -> bool:
        """Чи містить одна компонента всі n точок."""
        return any(len(c) == n for c in self.components)

    def __len__(self) -> int:
        return len(self.components)

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка інваріантів:
          - жодна точка не лежить у двох компонентах;
          - немає порожніх компонент.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        owner: Dict[Pt, int] = {}
        shared: List[Tuple[Pt, int, int]] = []
        for ci, comp in enumerate(self.components):
            for p in comp:
                if p in owner:
                    shared.append((p, owner[p], ci))
                else:
                    owner[p] = ci
        empty = [ci for ci, comp in enumerate(self.components) if not comp]

        return {
            "components": len(self.components),
            "assigned_points": len(owner),
            "shared_points": shared,
            "empty_components": empty,
        }
