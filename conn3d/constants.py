"""Значення за замовчуванням для всього проєкту.

Кожна публічна функція приймає їх як keyword-аргументи; CLI віддає їх як опції.
"""

from __future__ import annotations

# Скільки найкоротших ребер застосовує LargestClusters за замовчуванням.
DEFAULT_PAIR_LIMIT: int = 1000

# Скільки найбільших компонент перемножуємо.
TOP_CLUSTERS: int = 3

# "python" | "numpy" для ребер, "python" | "scipy" для компонент.
DEFAULT_BACKEND: str = "python"
