import argparse
import logging

from typing import Iterable, NamedTuple, Optional, Union

from disjoint_set import DisjointSet, InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    u: int
    v: int
    weight: int

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


class Graph:
    def __init__(self, vertices: int, edges: Iterable[Union[Edge, tuple[int, int, int]]] = ()) -> None:
        if vertices < 0:
            raise InvalidArgumentError(f'vertex count must be non-negative, got {vertices}')

        self.vertices = vertices
        self.edges = [Edge(*edge) for edge in edges]

    def add_edge(self, u: int, v: int, weight: int) -> None:
        self.edges.append(Edge(u, v, weight))

    def kruskal_mst(self) -> int:
        return kruskal_mst(self)

    def __repr__(self):
        return f'Graph(vertices={self.vertices}, edges={len(self.edges)})'


class MSTResult(NamedTuple):
    '''
    Outcome of a Kruskal run. When the graph is disconnected `edges` is a
    minimum spanning forest and `is_spanning_tree` is False.
    '''
    total_weight: int
    edges: list[Edge]
    vertices: int

    @property
    def components(self) -> int:
        return self.vertices - len(self.edges)

    @property
    def is_spanning_tree(self) -> bool:
        return self.components <= 1


def _validate_edges(graph: Graph) -> None:
    for edge in graph.edges:
        for endpoint in (edge.u, edge.v):
            if not 0 <= endpoint < graph.vertices:
                raise OutOfRangeError(f'edge {edge} has endpoint {endpoint} outside [0, {graph.vertices})')


def kruskal_mst_edges(graph: Graph) -> MSTResult:
    '''
    Run Kruskal's algorithm over `graph` and return the accepted edges along
    with their total weight.

    The graph's own edge list is left untouched; a copy is sorted by weight.
    The sort is stable, so edges of equal weight are considered in insertion
    order and repeated runs pick the same edges.
    '''
    _validate_edges(graph)

    edges = sorted(graph.edges, key=lambda e: e.weight)
    ds = DisjointSet(graph.vertices)
    mst = []
    total = 0

    # perform kruskals
    for edge in edges:
        if ds.union(edge.u, edge.v):
            logger.debug('accepted edge %s', edge)
            mst.append(edge)
            total += edge.weight
        else:
            logger.debug('rejected edge %s', edge)

    logger.debug('kruskal: %d of %d edges accepted, %d component(s), total weight %d',
                 len(mst), len(edges), ds.count, total)

    return MSTResult(total, mst, graph.vertices)


def kruskal_mst(graph: Graph) -> int:
    return kruskal_mst_edges(graph).total_weight


def example_graph() -> Graph:
    graph = Graph(5)

    graph.add_edge(0, 1, 2)
    graph.add_edge(0, 3, 6)
    graph.add_edge(1, 2, 3)
    graph.add_edge(1, 3, 8)
    graph.add_edge(1, 4, 5)
    graph.add_edge(2, 4, 7)
    graph.add_edge(3, 4, 9)

    return graph


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='kruskal-mst',
                                     description='Compute the MST weight of the example graph')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print the selected edges and log every decision')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    result = kruskal_mst_edges(example_graph())

    print(f'Total weight of the Minimum Spanning Tree: {result.total_weight}')
    if args.verbose:
        print(result.edges)

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
