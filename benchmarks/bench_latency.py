"""Benchmark: per-role decision latency (p50/p95/mean).

Parses a hex background and resolves one role per call, cycling through
every role, so the numbers include color parsing.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from contrastkit import ContrastRole, contrasting_color, parse_color

_WARMUP: int = 200
_ITERATIONS: int = 5_000

_HEX_BACKGROUNDS = ["#000000", "#FFFFFF", "#FF8000", "#336699", "#808080", "#0A84FF"]
_ROLES = list(ContrastRole)


def bench_pick_latency() -> dict[str, object]:
    """Benchmark parse-and-pick latency across roles.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    for i in range(_WARMUP):
        contrasting_color(parse_color(_HEX_BACKGROUNDS[i % len(_HEX_BACKGROUNDS)]))

    latencies_ms: list[float] = []
    for i in range(_ITERATIONS):
        text = _HEX_BACKGROUNDS[i % len(_HEX_BACKGROUNDS)]
        role = _ROLES[i % len(_ROLES)]
        t0 = time.perf_counter()
        contrasting_color(parse_color(text), role)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "contrast_pick_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_pick_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
