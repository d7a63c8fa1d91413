"""
Fixed example graphs with known MST weights
"""

from matrix_graph import MatrixGraph


EXAMPLE_LABELS = ["A", "B", "C", "D", "E", "F", "G"]
EXAMPLE_MST_WEIGHT = 39

SQUARE_LABELS = ["A", "B", "C", "D"]
SQUARE_MST_WEIGHT = 7


def create_example_graph():
    """Create the 7-vertex example graph"""
    # Expected MST: AD(5), CE(5), DF(6), AB(7), BE(7), EG(9) = 39
    A, B, C, D, E, F, G = range(7)
    edges = [
        (A, B, 7),
        (A, D, 5),
        (B, C, 8),
        (B, D, 9),
        (B, E, 7),
        (C, E, 5),
        (D, E, 15),
        (D, F, 6),
        (E, F, 8),
        (E, G, 9),
        (F, G, 11),
    ]
    return MatrixGraph.from_edges(7, edges, labels=EXAMPLE_LABELS)


def create_square_graph():
    """Create a 4-vertex graph: AB=1, AC=2, BC=3, BD=4, CD=5"""
    # Expected MST: AB(1), AC(2), BD(4) = 7
    A, B, C, D = range(4)
    edges = [(A, B, 1), (A, C, 2), (B, C, 3), (B, D, 4), (C, D, 5)]
    return MatrixGraph.from_edges(4, edges, labels=SQUARE_LABELS)


if __name__ == "__main__":
    graph = create_example_graph()
    print("Created example graph:")
    print(f"  Vertices: {graph.num_vertices()}")
    print(
        "  Edges: "
        + ", ".join(
            f"{graph.label(u)}{graph.label(v)}({w:g})" for u, v, w in graph.edges()
        )
    )
    print(f"  Expected MST weight: {EXAMPLE_MST_WEIGHT}")
