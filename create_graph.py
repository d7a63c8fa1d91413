"""
Create random weighted graphs for the reverse-delete MST algorithm
Every generated graph is complete, so it is always connected
"""

import argparse
import os
import random
import networkx as nx
import matplotlib.pyplot as plt

from matrix_graph import MatrixGraph


MAX_WEIGHT = 10


def create_random_graph(num_vertices, rng=None, seed=None):
    """
    Create a complete undirected graph with uniform random weights in [0, 10)
    rng: random.Random instance to draw weights from; seeded from `seed` if omitted
    Passing both rng and seed is an error
    """
    if num_vertices < 1:
        raise ValueError(f"num_vertices must be at least 1, got {num_vertices}")
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both")
    if rng is None:
        rng = random.Random(seed)

    graph = MatrixGraph(num_vertices)
    # Iterate through all pairs of vertices
    for i in range(num_vertices):
        for j in range(i + 1, num_vertices):
            graph.add_edge(i, j, rng.random() * MAX_WEIGHT)

    return graph


def edge_labels(graph):
    """Edge weight labels for drawing, keyed by networkx edge"""
    return {(u, v): f"{w:.2f}" for u, v, w in graph.edges()}


def vertex_labels(graph):
    return {i: graph.label(i) for i in range(graph.num_vertices())}


def visualize_graph(graph, output_file, title="Input Graph"):
    """Visualize the graph and save to file"""
    G = graph.to_networkx()
    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(G, seed=42)

    nx.draw(
        G,
        pos,
        labels=vertex_labels(graph),
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )
    nx.draw_networkx_edge_labels(G, pos, edge_labels(graph), font_size=10)

    plt.title(title, fontsize=14, fontweight="bold")

    output_dir = os.path.dirname(output_file)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    plt.savefig(output_file, dpi=300, bbox_inches="tight")
    print(f"\n  Visualization saved to {output_file}")
    plt.close()

    return output_file


def print_graph_summary(graph, show_edges=True):
    """Print summary of the graph"""
    G = graph.to_networkx()

    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of vertices: {graph.num_vertices()}")
    print(f"Number of edges: {graph.num_edges()}")
    print(f"Is connected: {nx.is_connected(G)}")

    if show_edges:
        print("\nEdge list (with weights):")
        for u, v, w in graph.edges():
            print(f"  ({graph.label(u)}, {graph.label(v)}): weight = {w:.2f}")

    # Expected MST weight from NetworkX, as a reference value
    mst = nx.minimum_spanning_tree(G, weight="weight")
    mst_weight = sum(data["weight"] for _, _, data in mst.edges(data=True))
    print(f"\nExpected MST weight (NetworkX): {mst_weight:.2f}")
    print("=" * 70)


def main(argv=None):
    """Generate a random graph, print its summary and optionally plot it"""
    parser = argparse.ArgumentParser(
        description="Generate a random complete graph for the reverse-delete MST"
    )
    parser.add_argument(
        "--vertices", type=int, default=8, help="Number of vertices (default: 8)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Save a picture of the graph to this PNG file",
    )

    args = parser.parse_args(argv)

    print("=" * 70)
    print("Random Graph Generator for Reverse-Delete MST")
    print("=" * 70)

    print(f"\nGenerating random graph...")
    print(f"  Vertices: {args.vertices}")
    print(f"  Random seed: {args.seed}")

    graph = create_random_graph(args.vertices, seed=args.seed)

    print_graph_summary(graph, show_edges=args.vertices <= 20)

    if args.output:
        visualize_graph(graph, args.output)

    return graph


if __name__ == "__main__":
    main()
