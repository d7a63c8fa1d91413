"""
Dense matrix graph used by the reverse-delete MST algorithm
Weights live in an n x n numpy array, absent edges are stored as infinity
"""

import math
import numpy as np
import networkx as nx


NO_EDGE = math.inf


class MatrixGraph:
    def __init__(self, num_vertices, directed=False, labels=None):
        """
        Create a graph with a fixed number of vertices and no edges
        labels: optional list of vertex names, used for reporting only
        """
        if num_vertices < 1:
            raise ValueError(f"A graph needs at least one vertex, got {num_vertices}")
        if labels is not None and len(labels) != num_vertices:
            raise ValueError(
                f"Expected {num_vertices} labels, got {len(labels)}"
            )

        self.n = num_vertices
        self.directed = directed
        self.labels = list(labels) if labels is not None else None
        self.weights = np.full((num_vertices, num_vertices), NO_EDGE, dtype=float)

    @classmethod
    def from_edges(cls, num_vertices, edges, directed=False, labels=None):
        """Build a graph from a list of (u, v, weight) tuples"""
        graph = cls(num_vertices, directed=directed, labels=labels)
        for u, v, w in edges:
            graph.add_edge(u, v, w)
        return graph

    def check_vertex(self, i):
        # Negative indices would silently wrap around in numpy
        if not 0 <= i < self.n:
            raise IndexError(
                f"Vertex {i} out of range for graph with {self.n} vertices"
            )

    def num_vertices(self):
        return self.n

    def __len__(self):
        return self.n

    def is_edge(self, i, j):
        self.check_vertex(i)
        self.check_vertex(j)
        return bool(np.isfinite(self.weights[i, j]))

    def weight(self, i, j):
        """Weight of edge (i, j), or infinity if there is no such edge"""
        self.check_vertex(i)
        self.check_vertex(j)
        return float(self.weights[i, j])

    def add_edge(self, i, j, w):
        """Insert edge (i, j), overwriting the weight if it already exists"""
        self.check_vertex(i)
        self.check_vertex(j)
        if i == j:
            raise ValueError(f"Self-loops are not allowed, got ({i}, {j})")
        if not math.isfinite(w):
            raise ValueError(f"Edge ({i}, {j}) needs a finite weight, got {w}")

        self.weights[i, j] = w
        if not self.directed:
            self.weights[j, i] = w

    def delete_edge(self, i, j):
        self.check_vertex(i)
        self.check_vertex(j)
        self.weights[i, j] = NO_EDGE
        if not self.directed:
            self.weights[j, i] = NO_EDGE

    def neighbours(self, i):
        """Vertices adjacent to i, in ascending order"""
        self.check_vertex(i)
        return np.flatnonzero(np.isfinite(self.weights[i])).tolist()

    def edges(self):
        """
        List of (i, j, weight) for every present edge, in row-major order
        For undirected graphs each edge is listed once with i < j
        """
        present = np.isfinite(self.weights)
        if not self.directed:
            present = np.triu(present, k=1)
        rows, cols = np.nonzero(present)
        return [
            (int(i), int(j), float(self.weights[i, j])) for i, j in zip(rows, cols)
        ]

    def num_edges(self):
        return len(self.edges())

    def label(self, i):
        self.check_vertex(i)
        if self.labels is None:
            return str(i)
        return self.labels[i]

    def copy(self):
        graph = MatrixGraph(self.n, directed=self.directed, labels=self.labels)
        graph.weights = self.weights.copy()
        return graph

    def to_networkx(self):
        """Convert to a networkx graph with a 'weight' attribute on each edge"""
        G = nx.DiGraph() if self.directed else nx.Graph()
        G.add_nodes_from(range(self.n))
        for u, v, w in self.edges():
            G.add_edge(u, v, weight=w)
        return G

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return (
            f"MatrixGraph({self.n} vertices, "
            f"{self.num_edges()} edges, {kind})"
        )
