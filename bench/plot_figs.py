from __future__ import annotations

import os
import pandas as pd
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Patch

plt.rcParams.update({
    "font.size": 11,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "legend.fontsize": 10,
    "xtick.labelsize": 10,
    "ytick.labelsize": 10,
})

SUMMARY_PATH = "bench/summary/summary.csv"
OUT_DIR = "bench/figures"

PATTERN_ORDER = ["duplex-append", "triplex-append", "triplex-prepend", "triplex-random", "triplex-squeeze"]

# BW-friendly hatch/line styles
HATCHES = {
    "duplex-append": "..",
    "triplex-append": "///",
    "triplex-prepend": "\\\\\\",
    "triplex-random": "xx",
    "triplex-squeeze": "--",
}
LINESTYLES = {
    "duplex-append": ("-", "o"),
    "triplex-append": ("--", "s"),
    "triplex-prepend": (":", "^"),
    "triplex-random": ("-.", "D"),
    "triplex-squeeze": ("-", "v"),
}

# Digits live in U+0100..U+80FF: 2 UTF-8 bytes below U+0800, 3 above.
UTF8_BYTES_PER_CHAR = 3


def ns_to_us(ns: float) -> float:
    return ns / 1e3


def _load_summary():
    df = pd.read_csv(SUMMARY_PATH)
    df = df[df["pattern"].isin(PATTERN_ORDER)].copy()
    df["pattern"] = pd.Categorical(df["pattern"], categories=PATTERN_ORDER, ordered=True)
    # One row per pattern: keep the largest workload.
    df = df.sort_values(["pattern", "count"]).groupby("pattern", observed=True).tail(1)
    return df


def _save(fig, stem: str):
    os.makedirs(OUT_DIR, exist_ok=True)
    pdf_path = os.path.join(OUT_DIR, f"{stem}.pdf")
    png_path = os.path.join(OUT_DIR, f"{stem}.png")
    fig.savefig(pdf_path)
    fig.savefig(png_path, dpi=300)
    plt.close(fig)
    print(f"[{stem}] Saved to {pdf_path} and {png_path}")


def plot_fig1_allocation_latency():
    df = _load_summary()
    patterns = [str(p) for p in df["pattern"]]
    per_id_us = df["per_id_ns"].apply(ns_to_us).to_numpy()

    fig, ax = plt.subplots(figsize=(6.5, 3.8))
    x = np.arange(len(patterns))
    bars = ax.bar(x, per_id_us, width=0.7, color="white", edgecolor="black", linewidth=0.8)
    for bar, pattern in zip(bars, patterns):
        bar.set_hatch(HATCHES.get(pattern, ""))

    ax.set_xticks(x)
    ax.set_xticklabels(patterns, rotation=20, ha="right")
    ax.set_ylabel("Latency per id (µs)")
    ax.set_title("Mean Allocation Latency by Insertion Pattern")
    ax.grid(axis="y", linestyle="--", linewidth=0.5, alpha=0.7)

    fig.tight_layout()
    _save(fig, "fig1_allocation_latency")


def plot_fig2_id_size():
    df = _load_summary()

    metrics = ["mean_id_chars", "max_id_chars", "max_id_utf8_bytes"]
    labels = ["mean |id| (chars)", "max |id| (chars)", "max |id| (UTF-8 bytes)"]
    pivot = df.set_index("pattern")[metrics].rename(columns=dict(zip(metrics, labels)))

    fig, ax = plt.subplots(figsize=(6.8, 3.8))
    pivot.plot(kind="barh", ax=ax)

    ax.set_xlabel("Size")
    ax.set_ylabel("")
    ax.set_title("Identifier Size by Insertion Pattern")
    ax.grid(axis="x", linestyle="--", linewidth=0.5, alpha=0.7)

    metric_hatches = dict(zip(labels, ["///", "\\\\\\", "xx"]))
    for i, cont in enumerate(ax.containers):
        if i >= len(labels):
            break
        for p in cont.patches:
            p.set_hatch(metric_hatches[labels[i]])
            p.set_facecolor("white")
            p.set_edgecolor("black")
            p.set_linewidth(0.8)

    handles = [
        Patch(facecolor="white", edgecolor="black", hatch=metric_hatches[l], label=l)
        for l in labels
    ]
    ax.legend(handles=handles, title="", frameon=False)

    fig.tight_layout()
    _save(fig, "fig2_id_size")


def plot_fig3_key_storage_model():
    """
    Fig.3: Model-based key storage for a list of N items.

    Model:
      Per item key storage <= mean |id| (chars) * UTF8_BYTES_PER_CHAR
    """
    df = _load_summary()
    items = np.array([1e3, 1e4, 1e5, 1e6], dtype=float)

    fig, ax = plt.subplots(figsize=(6.5, 3.8))
    for _, row in df.iterrows():
        pattern = str(row["pattern"])
        per_item = float(row["mean_id_chars"]) * UTF8_BYTES_PER_CHAR
        total_mb = (items * per_item) / (1024.0 * 1024.0)

        ls, mk = LINESTYLES.get(pattern, ("-", "o"))
        ax.plot(
            items,
            total_mb,
            linestyle=ls,
            marker=mk,
            markerfacecolor="none",
            markeredgecolor="black",
            color="black",
            label=pattern,
        )

    ax.set_xscale("log")
    ax.set_xlabel("Number of List Items")
    ax.set_ylabel("Key Storage Upper Bound (MB)")
    ax.set_title("Position Key Storage Model (UTF-8)")
    ax.legend(title="Pattern", frameon=False)

    ax.grid(True, which="both", linestyle="--", linewidth=0.5, alpha=0.7)
    fig.tight_layout()
    _save(fig, "fig3_key_storage_model")


def main():
    plot_fig1_allocation_latency()
    plot_fig2_id_size()
    plot_fig3_key_storage_model()


if __name__ == "__main__":
    main()
