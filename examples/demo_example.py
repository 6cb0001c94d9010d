# examples/demo_example.py
from conn3d.io import parse_points
from conn3d.edges import enumerate_edges
from conn3d.clusters import circuit_sizes, largest_clusters
from conn3d.connectivity import connecting_edge

EXAMPLE = """\
162,817,812
57,618,57
906,360,560
592,479,940
352,342,300
466,668,158
542,29,236
431,825,988
739,650,466
52,470,668
216,146,977
819,987,18
117,168,530
805,96,715
346,949,466
970,615,88
941,993,340
862,61,35
984,92,344
425,690,689
"""

if __name__ == "__main__":
    boxes = parse_points(EXAMPLE)
    edges = enumerate_edges(boxes)

    print("edges:", len(edges))
    print("circuits after 10:", circuit_sizes(boxes, edges, 10))
    print("product of three largest:", largest_clusters(boxes, edges, 10))   # 40

    last = connecting_edge(boxes, edges)
    print("last connection:", last.a, last.b, "->", last.checksum())         # 25272
