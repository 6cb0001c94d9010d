# examples/main.py
from __future__ import annotations

import argparse
import logging
import sys

from conn3d.io import load_points
from conn3d.pipeline import analyze
from conn3d.edges import enumerate_edges
from conn3d.constants import DEFAULT_BACKEND, DEFAULT_PAIR_LIMIT, TOP_CLUSTERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Connect junction boxes by shortest distances.")
    parser.add_argument("input", help="file with one 'x,y,z' point per line")
    parser.add_argument("--pairs", type=int, default=DEFAULT_PAIR_LIMIT, help="shortest connections for the circuit product")
    parser.add_argument("--top", type=int, default=TOP_CLUSTERS, help="how many largest circuits to multiply")
    parser.add_argument("--edges-backend", default=DEFAULT_BACKEND, choices=["python", "numpy"])
    parser.add_argument("--clusters-backend", default=DEFAULT_BACKEND, choices=["python", "scipy"])
    parser.add_argument("--plot", metavar="PNG", help="save a 3D picture of the circuits")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # --- 1) Вхідні дані ---
        boxes = load_points(args.input)

        # --- 2) Ребра один раз, обидва запити ---
        edges = enumerate_edges(boxes, backend=args.edges_backend)
        report = analyze(
            boxes,
            limit=args.pairs,
            top=args.top,
            clusters_backend=args.clusters_backend,
            edges=edges,
        )

        which = "three" if args.top == 3 else str(args.top)
        print(f"the product of the size of the {which} largest circuits is {report.largest_product}")
        if report.checksum is not None:
            print(f"The product of x coordinates of the last boxes I need to connect is {report.checksum}")
        else:
            print("Not enough boxes to connect.")

        # --- 3) Картинка (опційно) ---
        if args.plot:
            from conn3d.plot import plot_circuits

            out = plot_circuits(boxes, edges, args.plot, limit=args.pairs)
            print(f"{out} записано (circuits після {min(args.pairs, len(edges))} з'єднань).")
    except (OSError, ValueError, OverflowError, RuntimeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
