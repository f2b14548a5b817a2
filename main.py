import argparse
import time

import pandas as pd

from benchmarking import BenchmarkRunner
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from graph_generators.two_cliques import generate_two_cliques
from instance_reader import read_col_instance
from mincut.graph import as_generator
from mincut.karger import karger_min_cut
from mincut.karger_stein import karger_stein_min_cut
from mincut.repetitions import karger_repetitions, karger_stein_repetitions


# Karger & Stein, "A new approach to the minimum cut problem": https://doi.org/10.1145/234533.234534

ALGORITHMS = {
    'karger': ("Karger", karger_min_cut, karger_repetitions),
    'karger-stein': ("Karger-Stein", karger_stein_min_cut, karger_stein_repetitions),
}

# benchmark defaults
N_VALUES = [10, 20, 30, 40]
TRIALS = 5
MODEL_PARAMS = {
    'ER': {'p': 0.3},
    'BA': {'m': 3}
}


def format_partitions(cut):
    return " ".join("{ " + " ".join(str(u) for u in part) + " }" for part in cut.partitions())


def run_algorithms(graph, names, repetitions=None, seed=None, progress=True):
    rng = as_generator(seed)
    results = {}
    for name in names:
        label, algorithm, default_repetitions = ALGORITHMS[name]
        nb_repeat = repetitions if repetitions is not None else default_repetitions(graph.n)
        print(f"\nAlgorithm: \"{label}\"\n"
              f"    - Number of repetitions: {nb_repeat}")

        time_start = time.perf_counter()
        cut = algorithm(graph, repetitions=nb_repeat, rng=rng, progress=progress)
        duration = (time.perf_counter() - time_start) * 1000

        print(f"    - Best minimum cut's size found: {cut.cut_size}\n"
              f"    - Partitions: {format_partitions(cut)}\n"
              f"    - Duration: {duration:.0f}ms")
        results[name] = cut
    return results


def run_benchmark(args):
    runner = BenchmarkRunner(
        {
            'karger': karger_min_cut,
            'karger_stein': karger_stein_min_cut,
        },
        {
            'ER': generate_er,
            'BA': generate_ba,
        },
        seed=args.seed)
    results_df = runner.run(models=['ER', 'BA'], n_values=N_VALUES,
                            trials=TRIALS, model_params=MODEL_PARAMS)

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)
    print("\nBenchmark Results:")
    print(results_df)

    if args.csv:
        results_df.to_csv(args.csv, index=False)
        print(f"\nResults saved to {args.csv}")
    if args.plots:
        from analysis import plot_scaling
        print(plot_scaling(results_df, args.plots))
        print(f"Figures saved to {args.plots}")
    return results_df


def main(argv=None):
    parser = argparse.ArgumentParser(description="Randomized global minimum cut")

    parser.add_argument("instance", nargs="?", default=None,
                        help="DIMACS .col instance; the two-clique example runs without it")

    parser.add_argument("--algorithm", type=str, default="both",
                        choices=["karger", "karger-stein", "both"],
                        help="Algorithm to run")

    parser.add_argument("--repetitions", type=int, default=None,
                        help="Override the number of repetitions")

    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed")

    parser.add_argument("--benchmark", action="store_true",
                        help="Benchmark both algorithms on ER/BA random graphs")

    parser.add_argument("--csv", type=str, default=None,
                        help="Where to save the benchmark results")

    parser.add_argument("--plots", type=str, default=None,
                        help="Directory for the benchmark scaling figures")

    args = parser.parse_args(argv)

    if args.benchmark:
        return run_benchmark(args)

    if args.instance is None:
        graph = generate_two_cliques()
        source = "two cliques example"
    else:
        graph = read_col_instance(args.instance)
        source = args.instance
    graph.validate()

    print(f"\nInput graph: \"{source}\" (|V| = {graph.n}, |E| = {len(graph.edges)})")

    names = list(ALGORITHMS) if args.algorithm == "both" else [args.algorithm]
    results = run_algorithms(graph, names, args.repetitions, args.seed)
    print()
    return results


if __name__ == "__main__":
    main()
