## Benchmark the union-find Kruskal against networkx's MST on generated graphs

import argparse
import time

from typing import Any, Callable, Optional

import networkx as nx

import nx_utils
from kruskal import Graph, kruskal_mst

# Which impl is the one being benchmarked against
BASELINE = 'networkx'

IMPLS: dict[str, Callable[[Graph], int]] = {
    BASELINE: nx_utils.networkx_mst_weight,
    'kruskal (union-find)': kruskal_mst,
}

def time_mst(graph: Graph, reps: int, solver: Callable[[Graph], int]) -> dict[str, Any]:
    compute_times = []
    weights = []
    for _ in range(reps):
        start = time.perf_counter()
        weights.append(solver(graph))
        compute_times.append(time.perf_counter() - start)

    return {
        'compute_times': compute_times,
        'weights': weights,
    }

def summarize(metrics: dict[str, Any]) -> dict[str, Any]:
    metrics['avg_compute_time'] = sum(metrics['compute_times'])/len(metrics['compute_times'])

    if min(metrics['weights']) == max(metrics['weights']):
        metrics['weight'] = min(metrics['weights'])
        del metrics['weights']

    return metrics

def run_benchmarks(tests: dict[str, Callable[[], Graph]],
                   impls: dict[str, Callable[[Graph], int]],
                   baseline: str,
                   baseline_reps: int,
                   reps: int,
                   verbose: bool=True) -> dict[str, dict[str, Any]]:
    all_metrics = {
        impl: {} for impl in impls.keys()
    }

    for (test_name, test_gen) in tests.items():
        if verbose:
            print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        for (impl, solver) in impls.items():
            if verbose:
                print(f'  Running {impl} impl on test "{test_name}"...')

            nreps = baseline_reps if impl == baseline else reps
            metrics = summarize(time_mst(graph, nreps, solver))

            if 'weight' not in metrics:
                print(f'!!! Error on {impl}: inconsistent outputs')

            all_metrics[impl][test_name] = metrics

        if verbose:
            print()

    return all_metrics

def print_stats(all_metrics: dict[str, dict[str, Any]], baseline: str) -> None:
    for impl in all_metrics:
        if impl == baseline:
            continue

        print(f'Performance of {impl}:')
        all_tests = all_metrics[impl]
        speedups = []
        for (test, metrics) in all_tests.items():
            print(f'  {test} ({len(metrics["compute_times"])} runs):')

            expected = all_metrics[baseline][test].get('weight')
            if 'weight' not in metrics or metrics['weight'] != expected:
                print('Inconsistent result on this test')
                continue

            compute_time = metrics['avg_compute_time']
            speedup = all_metrics[baseline][test]['avg_compute_time'] / compute_time
            speedups.append(speedup)

            print(f'    Weight = {metrics["weight"]},  Compute time = {compute_time:0.4f}s')
            print(f'    Compute speedup={speedup:0.2f}x')
            print()

        if speedups:
            print(f'Average computation time speedup of {impl}: {sum(speedups)/len(speedups):0.2f}')
        print()

def default_tests(min_weight: int, max_weight: int, seed: int) -> dict[str, Callable[[], Graph]]:
    def create_arb_weight_test(g_fxn: Callable[..., nx.classes.graph.Graph],
                               g_args: tuple[Any, ...],
                               nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[], Graph]:
        def inner():
            g = g_fxn(*g_args)
            return nx_utils.from_networkx(g,
                                          nx_utils.arbitrary_weight(min_weight, max_weight, seed),
                                          nodename_to_idx=nodename_to_idx)

        return inner

    return {
        '2-degree Circulant n=50000':
            create_arb_weight_test(nx.circulant_graph,
                                   (50000, [1, 2]),
            ),

        'Hypercube d=12, n=4096':
            create_arb_weight_test(nx.hypercube_graph,
                                   (12,),
                                   nx_utils.hypercube_idx,
            ),

        'Connected Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.connected_caveman_graph,
                                   (500, 20),
            ),

        # disconnected, so both sides report a spanning forest
        'Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.caveman_graph,
                                   (500, 20),
            ),

        'Binomial Graph, p=8e-4 n=20000':
            create_arb_weight_test(nx.fast_gnp_random_graph,
                                   (20000, 8e-4, seed),
            ),
    }

def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the union-find Kruskal MST against networkx')
    parser.add_argument('--baseline-reps',
                        default=3,
                        help='the number of times to repeat each experiment for the networkx baseline',
                        type=int)
    parser.add_argument('--reps',
                        default=10,
                        help='the number of times to repeat each experiment for the other implementations',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)

    args = parser.parse_args(argv)

    if args.baseline_reps < 1 or args.reps < 1:
        parser.error('repetition counts must be positive')

    tests = default_tests(args.min_weight, args.max_weight, args.seed)
    all_metrics = run_benchmarks(tests, IMPLS, BASELINE, args.baseline_reps, args.reps)
    print_stats(all_metrics, BASELINE)

    return 0

if __name__ == '__main__':
    raise SystemExit(main())
