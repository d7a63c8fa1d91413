"""
Reverse-Delete Algorithm Implementation for Minimum Spanning Trees
Starts from the full edge set and drops edges heaviest first,
keeping a deletion only if the graph stays connected
"""

import argparse
import os
import random
import time
import networkx as nx
import matplotlib.pyplot as plt

from create_graph import create_random_graph, edge_labels, vertex_labels
from example_graph import create_example_graph, EXAMPLE_MST_WEIGHT
from check_mst import check_mst


class DisconnectedGraphError(ValueError):
    """Raised when an MST is requested for a graph that is not connected"""

    def __init__(self, unreachable):
        self.unreachable = sorted(unreachable)
        super().__init__(
            f"Graph is not connected: vertices {self.unreachable} "
            f"cannot be reached from vertex 0"
        )


class Edge:
    def __init__(self, x, y, w):
        self.x = x
        self.y = y
        self.w = w

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.x, self.y, self.w) == (other.x, other.y, other.w)

    def __hash__(self):
        return hash((self.x, self.y, self.w))

    def __repr__(self):
        return f"Edge({self.x}, {self.y}, {self.w})"


def reachable_vertices(graph):
    """Flag per vertex, True if it can be reached from vertex 0"""
    visited = [False] * graph.num_vertices()
    visited[0] = True
    worklist = [0]

    while worklist:
        i = worklist.pop()
        for j in graph.neighbours(i):
            # Mark on push so no vertex enters the worklist twice
            if not visited[j]:
                visited[j] = True
                worklist.append(j)

    return visited


def is_connected(graph):
    """Check whether every vertex is reachable from vertex 0"""
    return all(reachable_vertices(graph))


def get_edges(graph):
    """Present edges as Edge objects, heaviest first"""
    edges = [Edge(i, j, w) for i, j, w in graph.edges()]
    # sorted() is stable with reverse=True, equal weights keep row-major order
    return sorted(edges, key=lambda edge: edge.w, reverse=True)


def total_edge_weight(graph):
    """Sum of the weights of all present edges"""
    return sum((w for _, _, w in graph.edges()), 0.0)


class ReverseDeleteMST:
    def __init__(self, graph):
        """
        Prepare the reverse-delete algorithm for a graph
        The graph is reduced to its MST in place when run() is called
        """
        if graph.directed:
            raise ValueError("Reverse-delete MST requires an undirected graph")

        self.graph = graph
        self.kept_edges = []
        self.removed_edges = []
        self.connectivity_checks = 0
        self.elapsed = None

    def check_connected(self):
        self.connectivity_checks += 1
        return is_connected(self.graph)

    def run(self, verbose=False):
        """Run the reverse-delete algorithm and return the reduced graph"""
        start_time = time.time()
        # Bookkeeping describes the latest run only
        self.kept_edges = []
        self.removed_edges = []
        self.connectivity_checks = 0
        self.elapsed = None

        if not self.check_connected():
            visited = reachable_vertices(self.graph)
            raise DisconnectedGraphError(
                [v for v, seen in enumerate(visited) if not seen]
            )

        edges = get_edges(self.graph)
        if verbose:
            print("Starting Reverse-Delete Algorithm...")
            print(f"Number of vertices: {self.graph.num_vertices()}")
            print(f"Number of edges: {len(edges)}")

        for edge in edges:
            self.graph.delete_edge(edge.x, edge.y)
            if self.check_connected():
                self.removed_edges.append(edge)
            else:
                # The edge is a bridge, the tree needs it
                self.graph.add_edge(edge.x, edge.y, edge.w)
                self.kept_edges.append(edge)

        self.elapsed = time.time() - start_time
        if verbose:
            print(f"Algorithm completed in {self.elapsed:.2f} seconds")
            print(f"Kept {len(self.kept_edges)} MST edges")

        return self.graph

    def mst_edges(self):
        return self.graph.edges()

    def total_weight(self):
        return total_edge_weight(self.graph)

    def print_debug_info(self):
        """Print the decision taken for every edge"""
        print("\nEdge Decisions (heaviest first):")
        print(f"{'From':<6} {'To':<6} {'Weight':<10} {'Decision':<10}")
        print("-" * 40)

        kept = set(self.kept_edges)
        decisions = sorted(
            self.kept_edges + self.removed_edges,
            key=lambda edge: edge.w,
            reverse=True,
        )
        for edge in decisions:
            decision = "KEPT" if edge in kept else "REMOVED"
            print(
                f"{self.graph.label(edge.x):<6} {self.graph.label(edge.y):<6} "
                f"{edge.w:<10.2f} {decision:<10}"
            )

        print(f"\nKept edges: {len(self.kept_edges)}")
        print(f"Removed edges: {len(self.removed_edges)}")
        print(f"Connectivity checks: {self.connectivity_checks}")

        visited = reachable_vertices(self.graph)
        unreachable = [v for v, seen in enumerate(visited) if not seen]
        if unreachable:
            print(f"⚠ Unreachable vertices from vertex 0: {unreachable}")
        else:
            print("✓ All vertices reachable via MST edges")

    def visualize(self, original, save_path="reverse_delete_mst.png"):
        """Visualize the original graph next to its MST"""
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

        G = original.to_networkx()
        pos = nx.spring_layout(G, seed=42)
        labels = vertex_labels(original)

        # Original graph
        ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
        nx.draw(
            G,
            pos,
            ax=ax1,
            labels=labels,
            with_labels=True,
            node_color="lightblue",
            node_size=700,
            font_size=12,
            font_weight="bold",
        )
        nx.draw_networkx_edge_labels(G, pos, edge_labels(original), ax=ax1)

        # MST, drawn on the same layout so vertices line up
        ax2.set_title("MST (Reverse-Delete)", fontsize=14, fontweight="bold")
        mst_graph = self.graph.to_networkx()
        nx.draw(
            mst_graph,
            pos,
            ax=ax2,
            labels=labels,
            with_labels=True,
            node_color="lightgreen",
            node_size=700,
            font_size=12,
            font_weight="bold",
            edge_color="red",
            width=3,
        )
        if mst_graph.number_of_edges():
            nx.draw_networkx_edge_labels(
                mst_graph, pos, edge_labels(self.graph), ax=ax2
            )

        output_dir = os.path.dirname(save_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        plt.tight_layout()
        plt.savefig(save_path, dpi=300, bbox_inches="tight")
        print(f"Visualization saved to {save_path}")
        plt.close(fig)

        return mst_graph


def make_mst(graph):
    """Reduce the graph to its minimum spanning tree in place and return it"""
    return ReverseDeleteMST(graph).run()


def run_experiment(
    graph, experiment_num, visualize=False, output_dir="mst_visualizations"
):
    """Run the reverse-delete algorithm on one graph and verify the result"""
    num_vertices = graph.num_vertices()
    num_edges = graph.num_edges()

    print(f"\n{'=' * 70}")
    print(f"Experiment {experiment_num}: {num_vertices} vertices, {num_edges} edges")
    print("=" * 70)

    original = graph.copy()
    engine = ReverseDeleteMST(graph)
    engine.run(verbose=True)

    # Verify with NetworkX
    check = check_mst(original, graph)

    print(f"\nMST Weight: {check['mst_weight']:.2f}")
    print(f"MST Edges Found: {check['num_edges']}/{check['expected_edges']} expected")
    print(f"NetworkX MST Weight: {check['networkx_weight']:.2f}")
    print(f"Status: {'✓ CORRECT' if check['is_correct'] else '✗ INCORRECT'}")

    if not check["is_correct"]:
        print(f"\n--- Debug Info for Experiment {experiment_num} ---")
        engine.print_debug_info()

    if visualize:
        filename = os.path.join(
            output_dir, f"reverse_delete_mst_exp{experiment_num}.png"
        )
        engine.visualize(original, filename)

    return {
        "experiment": experiment_num,
        "num_vertices": num_vertices,
        "num_edges": num_edges,
        "mst_edges": engine.mst_edges(),
        "mst_weight": check["mst_weight"],
        "networkx_weight": check["networkx_weight"],
        "is_correct": check["is_correct"],
        "edges_found": check["num_edges"],
        "edges_expected": check["expected_edges"],
        "connectivity_checks": engine.connectivity_checks,
        "elapsed": engine.elapsed,
    }


def print_summary(results):
    print("\n" + "=" * 70)
    print(" " * 25 + "SUMMARY")
    print("=" * 70)
    print(
        f"{'Exp':<5} {'Vertices':<10} {'Edges':<7} {'MST Wt':<9} {'Found':<10} {'Status':<10}"
    )
    print("-" * 70)

    for result in results:
        status = "✓ PASS" if result["is_correct"] else "✗ FAIL"
        found_str = f"{result['edges_found']}/{result['edges_expected']}"
        print(
            f"{str(result['experiment']):<5} {result['num_vertices']:<10} "
            f"{result['num_edges']:<7} {result['mst_weight']:<9.2f} "
            f"{found_str:<10} {status:<10}"
        )


def main(argv=None):
    """Test A on the example graph, Test B on a batch of random graphs"""
    parser = argparse.ArgumentParser(
        description="Minimum spanning trees with the reverse-delete algorithm"
    )
    parser.add_argument(
        "--vertices",
        type=int,
        default=100,
        help="Vertices per random graph (default: 100)",
    )
    parser.add_argument(
        "--graphs", type=int, default=20, help="Number of random graphs (default: 20)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--visualize", action="store_true", help="Save a picture of every MST"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="mst_visualizations",
        help="Directory for pictures (default: mst_visualizations)",
    )

    args = parser.parse_args(argv)

    print("=" * 70)
    print(" " * 15 + "Reverse-Delete MST - Experiments")
    print("=" * 70)

    # Test A: the example graph, whose MST weight is known
    example = create_example_graph()
    result_a = run_experiment(
        example, "A", visualize=args.visualize, output_dir=args.output_dir
    )
    print(
        f"\nTest A: The example graph has an MST total weight of "
        f"{result_a['mst_weight']:.2f} (expected {EXAMPLE_MST_WEIGHT:.2f})"
    )

    # Test B: average MST weight over random complete graphs
    rng = random.Random(args.seed)
    results = [result_a]
    sum_of_weights = 0
    for i in range(1, args.graphs + 1):
        graph = create_random_graph(args.vertices, rng=rng)
        result = run_experiment(
            graph, i, visualize=args.visualize, output_dir=args.output_dir
        )
        results.append(result)
        sum_of_weights += result["mst_weight"]

    average_weight = sum_of_weights / args.graphs if args.graphs else 0.0

    print_summary(results)

    print("\n" + "=" * 70)
    print(
        f"Test B: The average weight of {args.graphs} random MSTs "
        f"({args.vertices} vertices) is approx {average_weight:.2f}"
    )
    print("=" * 70)

    return {
        "example_weight": result_a["mst_weight"],
        "average_weight": average_weight,
        "results": results,
    }


if __name__ == "__main__":
    main()
