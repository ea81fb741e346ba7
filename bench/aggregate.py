from __future__ import annotations

import argparse
import csv
import glob
import math
import os
from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Row:
    pattern: str
    count: int
    warmup: int
    rep: int
    elapsed_ns: int
    per_id_ns: int
    mean_id_chars: float
    max_id_chars: int
    max_id_utf8_bytes: int


def _read_rows(paths: List[str]) -> List[Row]:
    rows: List[Row] = []
    for p in paths:
        with open(p, "r", newline="") as f:
            r = csv.DictReader(f)
            required = {
                "pattern",
                "count",
                "warmup",
                "rep",
                "elapsed_ns",
                "per_id_ns",
                "mean_id_chars",
                "max_id_chars",
                "max_id_utf8_bytes",
            }
            if not required.issubset(set(r.fieldnames or [])):
                missing = required - set(r.fieldnames or [])
                raise ValueError(f"{p}: missing columns {sorted(missing)}")

            for d in r:
                rows.append(
                    Row(
                        pattern=str(d["pattern"]),
                        count=int(d["count"]),
                        warmup=int(d["warmup"]),
                        rep=int(d["rep"]),
                        elapsed_ns=int(d["elapsed_ns"]),
                        per_id_ns=int(d["per_id_ns"]),
                        mean_id_chars=float(d["mean_id_chars"]),
                        max_id_chars=int(d["max_id_chars"]),
                        max_id_utf8_bytes=int(d["max_id_utf8_bytes"]),
                    )
                )
    return rows


def _percentile(sorted_vals: List[int], q: float) -> int:
    """Nearest-rank percentile (q in [0,1])."""
    if not sorted_vals:
        raise ValueError("empty values")
    if q <= 0:
        return sorted_vals[0]
    if q >= 1:
        return sorted_vals[-1]
    k = math.ceil(q * len(sorted_vals)) - 1
    k = max(0, min(k, len(sorted_vals) - 1))
    return sorted_vals[k]


def _summarize(vals: List[int]) -> Dict[str, int]:
    vals_sorted = sorted(vals)
    n = len(vals_sorted)
    mean = int(round(sum(vals_sorted) / n))
    median = (
        vals_sorted[n // 2]
        if (n % 2 == 1)
        else int(round((vals_sorted[n // 2 - 1] + vals_sorted[n // 2]) / 2))
    )
    return {
        "n": n,
        "mean_ns": mean,
        "median_ns": median,
        "p95_ns": _percentile(vals_sorted, 0.95),
        "p99_ns": _percentile(vals_sorted, 0.99),
        "min_ns": vals_sorted[0],
        "max_ns": vals_sorted[-1],
    }


def main() -> None:
    ap = argparse.ArgumentParser(description="Aggregate raw benchmark CSVs into a summary.")
    ap.add_argument(
        "--in",
        dest="inputs",
        nargs="*",
        default=None,
        help="Input CSV files. If omitted, uses --glob.",
    )
    ap.add_argument(
        "--glob",
        dest="globpat",
        default="bench/outputs/*.csv",
        help="Glob pattern for input CSVs (default: bench/outputs/*.csv).",
    )
    ap.add_argument(
        "--out",
        dest="out",
        default="bench/summary/summary.csv",
        help="Output summary CSV path.",
    )
    ap.add_argument(
        "--include-warmup",
        action="store_true",
        help="Include warmup rows (default: excluded).",
    )
    args = ap.parse_args()

    paths = args.inputs if args.inputs else sorted(glob.glob(args.globpat))
    if not paths:
        raise SystemExit(f"No input CSVs found (inputs={args.inputs}, glob={args.globpat}).")

    rows = _read_rows(paths)
    if not args.include_warmup:
        rows = [x for x in rows if x.warmup == 0]

    # Group by (pattern, count)
    groups: Dict[Tuple[str, int], List[Row]] = {}
    for x in rows:
        groups.setdefault((x.pattern, x.count), []).append(x)

    os.makedirs(os.path.dirname(args.out), exist_ok=True)
    with open(args.out, "w", newline="") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "pattern",
                "count",
                "n",
                "mean_ns",
                "median_ns",
                "p95_ns",
                "p99_ns",
                "min_ns",
                "max_ns",
                "per_id_ns",
                "mean_id_chars",
                "max_id_chars",
                "max_id_utf8_bytes",
            ],
        )
        w.writeheader()

        for (pattern, count), rs in sorted(groups.items()):
            stats = _summarize([r.elapsed_ns for r in rs])
            w.writerow(
                {
                    "pattern": pattern,
                    "count": count,
                    **stats,
                    "per_id_ns": stats["mean_ns"] // max(count, 1),
                    "mean_id_chars": round(sum(r.mean_id_chars for r in rs) / len(rs), 2),
                    "max_id_chars": max(r.max_id_chars for r in rs),
                    "max_id_utf8_bytes": max(r.max_id_utf8_bytes for r in rs),
                }
            )

    print(f"Wrote: {args.out}")
    print(f"Inputs: {len(paths)} file(s); rows used: {len(rows)}; groups: {len(groups)}")


if __name__ == "__main__":
    main()
