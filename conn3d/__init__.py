"""
conn3d — зв'язність точок у 3D цілочисельному просторі (Py 3.9+).
Ребра за зростанням квадрата відстані, ліс неперетинних компонент,
добуток трьох найбільших circuits і контрольне ребро повного з'єднання.
"""

__version__ = "0.1.0"

from conn3d.geom import Pt, distance_sq, unique_points
from conn3d.io import parse_point, parse_points, load_points
from conn3d.edges import Edge, enumerate_edges
from conn3d.forest import ComponentForest
from conn3d.clusters import circuit_sizes, largest_clusters, product_of_largest
from conn3d.connectivity import connecting_edge, full_connectivity
from conn3d.pipeline import Report, analyze

__all__ = [
    "Pt", "distance_sq", "unique_points",
    "parse_point", "parse_points", "load_points",
    "Edge", "enumerate_edges", "ComponentForest",
    "circuit_sizes", "largest_clusters", "product_of_largest",
    "connecting_edge", "full_connectivity",
    "Report", "analyze", "__version__",
]
