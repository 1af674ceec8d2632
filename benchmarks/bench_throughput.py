"""Benchmark: contrast decision throughput.

Measures how many single-role picks and full palettes can be computed per
second through the public contrastkit API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from contrastkit import Color, ContrastOptions, ContrastRole, contrasting_color
from contrastkit.engine import ContrastEngine

_ITERATIONS: int = 20_000
_PALETTE_ITERATIONS: int = 5_000

_BACKGROUNDS: list[Color] = [
    Color(r / 4, g / 4, b / 4) for r in range(5) for g in range(5) for b in range(5)
]


def bench_pick_throughput() -> dict[str, object]:
    """Benchmark primary-role picks over a grid of backgrounds.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    n_backgrounds = len(_BACKGROUNDS)
    start = time.perf_counter()
    for i in range(_ITERATIONS):
        contrasting_color(_BACKGROUNDS[i % n_backgrounds], ContrastRole.PRIMARY)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "contrast_pick_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_palette_throughput() -> dict[str, object]:
    """Benchmark strict-mode palettes (all four roles) per background.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    engine = ContrastEngine(ContrastOptions(strict=True))
    n_backgrounds = len(_BACKGROUNDS)

    start = time.perf_counter()
    for i in range(_PALETTE_ITERATIONS):
        engine.palette(_BACKGROUNDS[i % n_backgrounds])
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "contrast_palette_throughput",
        "iterations": _PALETTE_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_PALETTE_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _PALETTE_ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_pick_throughput, "pick_throughput_baseline.json"),
        (bench_palette_throughput, "palette_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
