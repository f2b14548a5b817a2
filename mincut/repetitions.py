import concurrent.futures
import math
import multiprocessing
from typing import Callable, Optional

import numpy as np
from tqdm import tqdm

from mincut.graph import Graph, RandomSource, as_generator
from mincut.graph_cut import GraphCut


CutAlgorithm = Callable[[Graph, np.random.Generator], GraphCut]


def karger_repetitions(n: int) -> int:
    """C(n, 2) * ln(n) runs push the failure probability of Karger below 1/n."""
    return max(1, int(0.5 * n * (n - 1) * math.log(n)))


def karger_stein_repetitions(n: int) -> int:
    """ln(n)^2 runs of Karger-Stein give the same guarantee."""
    return max(1, int(math.log(n) ** 2))


def repeat_min_cut(algorithm: CutAlgorithm,
                   graph: Graph,
                   repetitions: int,
                   rng: RandomSource = None,
                   progress: bool = False,
                   desc: Optional[str] = None) -> GraphCut:
    """
    Runs `algorithm` `repetitions` times and keeps the smallest cut.

    All runs share one private copy of `graph`, so the caller's edge order is
    left alone while the runs keep reshuffling the copy.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be >= 1, got {repetitions}")

    rng = as_generator(rng)
    work = graph.copy()
    best = GraphCut.sentinel(graph)
    for _ in tqdm(range(repetitions), desc=desc, disable=not progress):
        best = min(best, algorithm(work, rng))
    return best


def _run_chunk(algorithm: CutAlgorithm, graph: Graph, repetitions: int,
               seed: np.random.SeedSequence) -> GraphCut:
    return repeat_min_cut(algorithm, graph, repetitions, np.random.default_rng(seed))


def parallel_min_cut(algorithm: CutAlgorithm,
                     graph: Graph,
                     repetitions: int,
                     seed: Optional[int] = None,
                     max_workers: Optional[int] = None) -> GraphCut:
    """
    Same as `repeat_min_cut` but spreads the runs over a process pool.

    Every worker gets its own graph copy and its own random stream spawned from
    a single SeedSequence, so no random state is shared between processes.
    `algorithm` must be a module-level function to be picklable.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be >= 1, got {repetitions}")
    if max_workers is None:
        max_workers = max(1, multiprocessing.cpu_count() - 1)

    workers = min(max_workers, repetitions)
    chunks = [repetitions // workers + (1 if i < repetitions % workers else 0)
              for i in range(workers)]
    seeds = np.random.SeedSequence(seed).spawn(workers)

    best = GraphCut.sentinel(graph)
    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_run_chunk, algorithm, graph, size, s)
                   for size, s in zip(chunks, seeds)]
        for future in concurrent.futures.as_completed(futures):
            best = min(best, future.result())
    return best
