import argparse

from typing import Optional

import numpy as np

from disjoint_set import InvalidArgumentError
from kruskal import Graph, kruskal_mst_edges


def random_adjacency(nvertices: int,
                     density: float=0.5,
                     min_weight: int=1,
                     max_weight: int=100,
                     seed: Optional[int]=None) -> np.ma.MaskedArray:
    '''
    Upper triangular weighted adjacency matrix; absent edges are masked, so
    zero and negative weights are usable.
    '''
    if nvertices < 0:
        raise InvalidArgumentError(f'vertex count must be non-negative, got {nvertices}')
    if not 0 <= density <= 1:
        raise InvalidArgumentError(f'density must be within [0, 1], got {density}')
    if min_weight > max_weight:
        raise InvalidArgumentError(f'min weight {min_weight} exceeds max weight {max_weight}')

    rng = np.random.default_rng(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    # Only bother filling upper triangle for undirected graphs, k=1 skips self-loops
    rows, cols = np.triu_indices(nvertices, k=1)
    picked = rng.choice(len(rows), size=total_edges, replace=False)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)
    absent = np.ones((nvertices, nvertices), dtype=bool)
    adj_matrix[rows[picked], cols[picked]] = rng.integers(min_weight, max_weight,
                                                          size=total_edges, endpoint=True)
    absent[rows[picked], cols[picked]] = False

    return np.ma.masked_array(adj_matrix, mask=absent)


def random_graph(nvertices: int,
                 density: float=0.5,
                 min_weight: int=1,
                 max_weight: int=100,
                 seed: Optional[int]=None) -> Graph:
    return from_adjacency(random_adjacency(nvertices, density, min_weight, max_weight, seed))


def from_adjacency(adj_matrix: np.ma.MaskedArray) -> Graph:
    graph = Graph(adj_matrix.shape[0])
    for i, j in zip(*np.nonzero(~np.ma.getmaskarray(adj_matrix))):
        graph.add_edge(int(i), int(j), int(adj_matrix[i, j]))
    return graph


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='graphgen',
                                     description='Generate a random graph and report its MST')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=None, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    try:
        adj_matrix = random_adjacency(args.nvertices, args.density,
                                      args.min_weight, args.max_weight, args.seed)
    except InvalidArgumentError as exc:
        parser.error(str(exc))
    graph = from_adjacency(adj_matrix)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({len(graph.edges)} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)
        print()

    result = kruskal_mst_edges(graph)
    print(f'Total weight: {result.total_weight}')
    if not args.quiet:
        print(f'  {len(result.edges)} edges accepted, {result.components} component(s)')

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
