# conn3d/io.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from .geom import Pt

logger = logging.getLogger(__name__)


def _where(lineno: Optional[int]) -> str:
    return f"Рядок {lineno}: " if lineno is not None else ""


def parse_point(line: str, lineno: Optional[int] = None) -> Pt:
    """
    Один рядок виду `x,y,z` -> Pt.
    Кожне поле - десяткове невід'ємне ціле без пробілів.
    """
    parts = line.split(",")
    if len(parts) != 3:
        raise ValueError(f"{_where(lineno)}не вдалось розбити '{line}' на x,y,z")
    coords = []
    for field in parts:
        if not (field.isascii() and field.isdigit()):
            raise ValueError(f"{_where(lineno)}не вдалось прочитати '{field}' як невід'ємне ціле")
        coords.append(int(field))
    return Pt(*coords)


def parse_points(text: str) -> List[Pt]:
    """
    Парсить точки з багаторядкового тексту (порожні рядки пропускаємо).
    Порядок зберігається - він потрібен для стабільного tie-break ребер.
    """
    points: List[Pt] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        points.append(parse_point(line, lineno))
    logger.debug("parsed %d points", len(points))
    return points


def load_points(path: Union[str, Path]) -> List[Pt]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_points(f.read())
