import numpy as np
import networkx as nx
import pandas as pd
import time
from typing import List, Dict, Callable, Any, Optional

from mincut.graph import Graph


def exact_min_cut(graph: Graph) -> int:
    """
    Deterministic minimum cut (networkx Stoer-Wagner) used as ground truth.
    Parallel edges become integer weights.
    """
    G = nx.from_numpy_array(graph.to_adjacency())
    cut_value, _ = nx.stoer_wagner(G, weight='weight')
    return int(cut_value)


class BenchmarkRunner:
    """
    Handles running benchmarks for different graph models and algorithms.
    """

    def __init__(self,
                 algorithms: Dict[str, Callable],
                 generators: Dict[str, Callable],
                 seed: Optional[int] = None):
        """
        Args:
            algorithms (Dict[str, Callable]):
                Dict of {'algo_name': algorithm_function}
                Each function is called as f(graph, rng=generator) and
                must return a GraphCut.

            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function is called as f(n=n, rng=generator, **kwargs)
                and must return a connected Graph.

            seed (Optional[int]):
                Root seed for reproducibility.
                If None, randomness is uncontrolled.
        """
        self.algorithms = algorithms
        self.generators = generators
        self.base_seed = seed

    def _trial_seeds(self, model_name: str, n: int, trials: int):
        # one independent stream per trial, derived from (seed, model, n)
        key = [ord(c) for c in model_name] + [n]
        root = np.random.SeedSequence(
            None if self.base_seed is None else [self.base_seed] + key)
        return root.spawn(trials)

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]]) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of trials to run for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}

        Returns:
            pd.DataFrame: A DataFrame with all results.
        """
        if trials < 1:
            raise ValueError("trials must be >= 1")
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                print(
                    f"Warning: Generator '{model_name}' not found. Skipping.")
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                print(
                    f"--- Running: Model={model_name}, n={n}, Trials={trials} ---")

                trial_results = {name: {'times': [], 'cuts': [], 'exact': 0}
                                 for name in self.algorithms}
                edge_counts = []
                vertex_counts = []
                true_cuts = []

                for trial_seed in self._trial_seeds(model_name, n, trials):
                    rng = np.random.default_rng(trial_seed)

                    # generate graph with the given params
                    graph = gen_func(n=n, rng=rng, **params)
                    true_val = exact_min_cut(graph)
                    edge_counts.append(len(graph.edges))
                    vertex_counts.append(graph.n)
                    true_cuts.append(true_val)

                    for algo_name, algo_func in self.algorithms.items():
                        graph_copy = graph.copy()

                        start_time = time.perf_counter()
                        cut = algo_func(graph_copy, rng=rng)
                        end_time = time.perf_counter()

                        data = trial_results[algo_name]
                        data['times'].append(end_time - start_time)
                        data['cuts'].append(cut.cut_size)
                        if cut.cut_size == true_val:
                            data['exact'] += 1

                for algo_name, data in trial_results.items():
                    all_results.append({
                        'model': model_name,
                        'requested_n': n,
                        'n': np.mean(vertex_counts),
                        'edges': np.mean(edge_counts),
                        'algorithm': algo_name,
                        'trials': trials,
                        'true_min_cut': np.mean(true_cuts),
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_cut': np.mean(data['cuts']),
                        'min_found_cut': np.min(data['cuts']),
                        'max_found_cut': np.max(data['cuts']),
                        'success_rate': data['exact'] / trials,
                    })

        print("--- Benchmark Complete ---")
        return pd.DataFrame(all_results)
