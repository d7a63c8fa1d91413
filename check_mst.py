"""
Check a computed MST against NetworkX
"""

import math
import networkx as nx


def check_mst(original, mst, rel_tol=1e-9):
    """
    Compare an MST (as a MatrixGraph) with the MST NetworkX finds
    for the original graph
    """
    G = original.to_networkx()
    T = mst.to_networkx()

    expected = nx.minimum_spanning_tree(G, weight="weight")
    networkx_weight = expected.size(weight="weight")
    mst_weight = T.size(weight="weight")

    # Every MST edge must exist in the original graph with the same weight
    is_subgraph = all(
        original.is_edge(u, v) and original.weight(u, v) == w
        for u, v, w in mst.edges()
    )

    is_tree = nx.is_tree(T)

    return {
        "num_edges": T.number_of_edges(),
        "expected_edges": original.num_vertices() - 1,
        "is_connected": nx.is_connected(T),
        "is_tree": is_tree,
        "is_subgraph": is_subgraph,
        "mst_weight": mst_weight,
        "networkx_weight": networkx_weight,
        "is_correct": (
            is_tree
            and is_subgraph
            and math.isclose(mst_weight, networkx_weight, rel_tol=rel_tol)
        ),
    }


def main():
    from example_graph import create_example_graph
    from reverse_delete import make_mst

    original = create_example_graph()
    mst = make_mst(original.copy())
    result = check_mst(original, mst)

    expected = nx.minimum_spanning_tree(original.to_networkx())
    print("Expected MST edges:")
    for u, v in sorted(expected.edges()):
        print(
            f"  ({original.label(u)},{original.label(v)}): {original.weight(u, v):g}"
        )

    print("\nReverse-delete MST edges:")
    for u, v, w in mst.edges():
        print(f"  ({mst.label(u)},{mst.label(v)}): {w:g}")

    print(f"\nTotal weight: {result['mst_weight']:g}")
    print(f"NetworkX weight: {result['networkx_weight']:g}")
    print(f"Number of edges: {result['num_edges']}")

    # Check connectivity
    print(f"\nOriginal graph connected: {nx.is_connected(original.to_networkx())}")
    print(f"MST connected: {result['is_connected']}")
    print(f"Status: {'✓ CORRECT' if result['is_correct'] else '✗ INCORRECT'}")

    return result


if __name__ == "__main__":
    main()
