import math
import os
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy.stats import linregress


ALGO_COLORS = {"karger": "#455A70", "karger_stein": "#7E546F"}


def predicted_work(algorithm: str, n, m):
    """
    Asymptotic cost of a full (repeated) run:
    Karger does n^2 log n runs of O(m), Karger-Stein does log^2 n runs of O(n^2 log n).
    """
    n = np.maximum(np.asarray(n, dtype=float), 2.0)
    m = np.asarray(m, dtype=float)
    if algorithm == "karger":
        return (n ** 2) * np.log(n) * m
    if algorithm == "karger_stein":
        return (n ** 2) * (np.log(n) ** 3)
    raise ValueError(f"Unknown algorithm: {algorithm}")


def loglog_regression(x, y):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    mask = (x > 0) & (y > 0)
    if mask.sum() < 2 or np.unique(x[mask]).size < 2:
        return {"slope": np.nan, "intercept": np.nan, "r2": np.nan, "mask": mask}
    res = linregress(np.log(x[mask]), np.log(y[mask]))
    return {
        "slope": float(res.slope),
        "intercept": float(res.intercept),
        "r2": float(res.rvalue ** 2),
        "mask": mask
    }


def style_axes(ax):
    ax.grid(True, alpha=0.3, linestyle="--")
    for spine in ax.spines.values():
        spine.set_color("black")
        spine.set_linewidth(1.0)
    ax.set_facecolor("white")


def plot_loglog_with_fit(ax, x, y, res, color, label=None):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    mask = res["mask"]
    ax.scatter(x[mask], y[mask], marker='x', s=40, alpha=0.85,
               color=color, label=label, zorder=3)

    if not math.isnan(res["slope"]):
        xs = np.sort(x[mask])
        ys = np.exp(res["intercept"] + res["slope"] * np.log(xs))
        ax.plot(xs, ys, linestyle="--", linewidth=2.0, color=color, zorder=4,
                label=f"fit slope={res['slope']:.3f} R2={res['r2']:.3f}")


def plot_scaling(df: pd.DataFrame, out_dir) -> pd.DataFrame:
    """
    Writes one log-log figure per (model, algorithm) of mean running time
    against predicted work, and returns the fitted slopes.
    """
    Path(out_dir).mkdir(parents=True, exist_ok=True)
    rows = []

    for (model, algorithm), sub in df.groupby(["model", "algorithm"]):
        sub = sub.sort_values("n")
        pred = predicted_work(algorithm, sub["n"].values, sub["edges"].values)
        res = loglog_regression(pred, sub["mean_time_s"].values)
        rows.append({"model": model, "algorithm": algorithm,
                     "slope": res["slope"], "intercept": res["intercept"], "r2": res["r2"]})

        fig, ax = plt.subplots(figsize=(7, 5))
        style_axes(ax)
        plot_loglog_with_fit(ax, pred, sub["mean_time_s"].values, res,
                             ALGO_COLORS.get(algorithm, "#607196"), label=algorithm)
        ax.set_xscale("log")
        ax.set_yscale("log")
        ax.set_xlabel("Predicted work")
        ax.set_ylabel("Mean time (s)")
        ax.set_title(f"{algorithm} on {model}")
        ax.legend()
        fig.savefig(os.path.join(out_dir, f"{model}_{algorithm}_scaling.png"),
                    dpi=150, bbox_inches="tight")
        plt.close(fig)

    return pd.DataFrame(rows)
