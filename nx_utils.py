import networkx as nx
import random

from typing import Any, Callable, Optional

from kruskal import Graph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def from_networkx(g: nx.classes.graph.Graph,
                  decide_weight: Optional[Callable[[Any, Any], int]]=None,
                  nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Graph:
    graph = Graph(g.number_of_nodes())

    # one row per edge, parallel edges of a MultiGraph included
    for (a, b, w) in g.edges(data='weight', default=1):
        # Convert edge names to index
        u = nodename_to_idx(a)
        v = nodename_to_idx(b)
        weight = w if decide_weight is None else decide_weight(a, b)
        graph.add_edge(u, v, weight)

    return graph

def to_networkx(graph: Graph) -> nx.MultiGraph:
    # MultiGraph so duplicate edges survive the round trip
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.vertices))
    for edge in graph.edges:
        g.add_edge(edge.u, edge.v, weight=edge.weight)
    return g

def networkx_mst_weight(graph: Graph) -> int:
    forest = nx.minimum_spanning_tree(to_networkx(graph), algorithm='kruskal')
    return sum(w for _u, _v, w in forest.edges(data='weight'))

def hypercube_idx(node: tuple[int, ...]) -> int:
    return sum(node[-i-1] * 2**i for i in range(len(node)))
