"""Print a side-by-side summary of saved contrast-kit benchmark results."""
from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

RESULT_FILES = [
    "pick_throughput_baseline.json",
    "palette_throughput_baseline.json",
    "latency_baseline.json",
]


def _load(path: Path) -> dict[str, object] | None:
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)  # type: ignore[return-value]


def build_table(results_dir: Path) -> Table:
    table = Table(title="contrast-kit benchmark results")
    table.add_column("Operation", min_width=30)
    table.add_column("Ops/sec", justify="right")
    table.add_column("Avg latency", justify="right")
    table.add_column("p95", justify="right")

    for fname in RESULT_FILES:
        data = _load(results_dir / fname)
        if data is None:
            table.add_row(f"[dim]{fname}[/dim]", "n/a", "n/a", "n/a")
            continue
        ops_sec = float(data.get("ops_per_second", 0))  # type: ignore[arg-type]
        avg_lat = float(data.get("avg_latency_ms", 0))  # type: ignore[arg-type]
        p95 = data.get("p95_ms")
        table.add_row(
            str(data.get("operation", fname)),
            f"{ops_sec:,.0f}" if ops_sec > 0 else "n/a",
            f"{avg_lat:.4f}ms" if avg_lat > 0 else "n/a",
            f"{float(p95):.4f}ms" if p95 is not None else "n/a",  # type: ignore[arg-type]
        )
    return table


def main() -> None:
    console = Console()
    console.print(build_table(Path(__file__).parent / "results"))
    console.print("Run: python benchmarks/bench_throughput.py && python benchmarks/bench_latency.py")


if __name__ == "__main__":
    main()
