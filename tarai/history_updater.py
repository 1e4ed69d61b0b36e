#!/usr/bin/env python3
"""
Update benchmark result files after a benchmark run.

Manages two files in the benchmarks directory:
- RESULTS.md: Quick overview of the latest mean time per case and variant
- HISTORY.md: Append-only log of all benchmark runs

Usage: python3 -m tarai.history_updater <results_dir>
"""

import sys
from datetime import datetime
from pathlib import Path

from .result_processor import load_results
from .variants import BASELINE, VARIANTS

RESULTS_FILE = "RESULTS.md"
HISTORY_FILE = "HISTORY.md"


def format_number(n: int) -> str:
    """Format large numbers with commas."""
    return f"{n:,}"


def to_micros(seconds: float) -> int:
    return round(seconds * 1_000_000)


def format_speedup(ratio: float | None) -> str:
    """Format speedup ratio as 'Nx' string."""
    if ratio is None:
        return "-"
    if ratio >= 100:
        return f"{ratio:.0f}x"
    if ratio >= 10:
        return f"{ratio:.1f}x"
    return f"{ratio:.2f}x"


def geometric_mean(values: list[float]) -> float | None:
    """Calculate geometric mean of positive values."""
    if not values:
        return None
    product = 1.0
    for v in values:
        product *= v
    return product ** (1 / len(values))


def speedup(baseline_micros: int | None, micros: int | None) -> float | None:
    """How many times faster than the baseline a variant ran."""
    if not baseline_micros or not micros:
        return None
    return baseline_micros / micros


def get_run_metadata(results_dir: Path) -> dict:
    """Extract timestamp and interpreter info from results directory."""
    dir_name = results_dir.name
    try:
        dt = datetime.strptime(dir_name, "%Y-%m-%d_%H%M%S")
        timestamp = dt.strftime("%Y-%m-%d %H:%M:%S")
        date_only = dt.strftime("%Y-%m-%d")
    except ValueError:
        timestamp = dir_name
        date_only = dir_name

    run_info = results_dir / "run_info.txt"
    version = "unknown"
    interpreter = "unknown"
    if run_info.exists():
        lines = run_info.read_text().strip().split("\n")
        version = lines[0] if lines and lines[0] else "unknown"
        interpreter = lines[1] if len(lines) > 1 else "unknown"

    return {
        "timestamp": timestamp,
        "date": date_only,
        "version": version,
        "interpreter": interpreter,
    }


def mean_micros(results: dict) -> dict:
    """Reduce loaded hyperfine-style results to {case: {variant: mean_us}}."""
    means = {}
    for case_name, document in results.items():
        means[case_name] = {}
        for r in document.get("results", []):
            variant = r.get("variant", "")
            mean = r.get("mean", 0)
            if variant and mean > 0:
                means[case_name][variant] = to_micros(mean)
    return means


# ============================================================================
# RESULTS.md - Quick overview table
# ============================================================================

def load_results_file(benchmarks_dir: Path) -> dict:
    """Load existing results from RESULTS.md.

    Returns: {case: {variant: mean_us}}
    """
    results_path = benchmarks_dir / RESULTS_FILE
    if not results_path.exists():
        return {}

    results = {}
    content = results_path.read_text()

    in_table = False
    variants = []
    for line in content.split("\n"):
        if line.startswith("| Case"):
            in_table = True
            # Strip the average speedup suffix like " (5.30x)"
            cols = [c.strip() for c in line.split("|")]
            variants = [col.split(" (")[0] for col in cols[2:-1]]
            continue
        if line.startswith("|---"):
            continue
        if in_table and line.startswith("|"):
            cols = [c.strip() for c in line.split("|")]
            if len(cols) >= 3:
                case_name = cols[1]
                if not case_name:
                    continue
                results[case_name] = {}
                for i, variant in enumerate(variants):
                    if i + 2 < len(cols) and cols[i + 2]:
                        val = cols[i + 2].split(" (")[0].replace(",", "").strip()
                        if val and val != "-":
                            try:
                                results[case_name][variant] = int(val)
                            except ValueError:
                                pass

    return results


def update_results_file(benchmarks_dir: Path, latest: dict, metadata: dict):
    """Update RESULTS.md with the latest means, keeping cases not in this run."""
    results_path = benchmarks_dir / RESULTS_FILE

    existing = load_results_file(benchmarks_dir)
    for case_name, case_means in latest.items():
        existing.setdefault(case_name, {}).update(case_means)

    variants = list(VARIANTS)
    compared = [v for v in variants if v != BASELINE]

    speedups = {}  # {case: {variant: ratio}}
    all_speedups = {v: [] for v in compared}
    for case_name, case_means in existing.items():
        speedups[case_name] = {}
        for v in compared:
            ratio = speedup(case_means.get(BASELINE), case_means.get(v))
            if ratio is not None:
                speedups[case_name][v] = ratio
                all_speedups[v].append(ratio)

    header_names = {}
    for v in variants:
        avg = geometric_mean(all_speedups[v]) if v in all_speedups else None
        header_names[v] = f"{v} ({format_speedup(avg)})" if avg is not None else v

    def cell(case_name: str, v: str) -> str:
        if v not in existing[case_name]:
            return "-"
        val = format_number(existing[case_name][v])
        if v in speedups[case_name]:
            val += f" ({format_speedup(speedups[case_name][v])})"
        return val

    col_widths = {"case": len("Case")}
    for v in variants:
        col_widths[v] = len(header_names[v])
    for case_name in existing:
        col_widths["case"] = max(col_widths["case"], len(case_name))
        for v in variants:
            col_widths[v] = max(col_widths[v], len(cell(case_name, v)))

    lines = [
        "# Benchmark Results",
        "",
        "Latest mean time per call in microseconds, speedup vs naive recursion in parentheses.",
        "",
        f"**Last Updated:** {metadata['timestamp']}",
        f"**Interpreter:** {metadata['interpreter']} (tarai {metadata['version']})",
        "",
    ]

    header = f"| {'Case':<{col_widths['case']}} |"
    separator = f"|{'-' * (col_widths['case'] + 2)}|"
    for v in variants:
        header += f" {header_names[v]:>{col_widths[v]}} |"
        separator += f"{'-' * (col_widths[v] + 2)}|"
    lines.append(header)
    lines.append(separator)

    for case_name in sorted(existing.keys()):
        row = f"| {case_name:<{col_widths['case']}} |"
        for v in variants:
            row += f" {cell(case_name, v):>{col_widths[v]}} |"
        lines.append(row)

    lines.append("")
    results_path.write_text("\n".join(lines))
    print(f"Results updated: {results_path}")


# ============================================================================
# HISTORY.md - Append-only results log
# ============================================================================

HISTORY_HEADER = """# Benchmark History

Tarai variant timings over time (append-only log, newest first).

| Date       | Interpreter          | Case         | Variant      | Mean (us)    | Speedup |
|------------|----------------------|--------------|--------------|--------------|---------|
"""


def append_to_history(benchmarks_dir: Path, latest: dict, metadata: dict):
    """Prepend this run's rows to HISTORY.md."""
    history_path = benchmarks_dir / HISTORY_FILE

    new_rows = []
    for case_name, case_means in sorted(latest.items()):
        for v in VARIANTS:
            if v not in case_means:
                continue
            ratio = speedup(case_means.get(BASELINE), case_means[v]) if v != BASELINE else None
            new_rows.append(
                f"| {metadata['date']:<10} | {metadata['interpreter']:<20} | {case_name:<12} | "
                f"{v:<12} | {format_number(case_means[v]):>12} | {format_speedup(ratio):>7} |"
            )

    if not new_rows:
        return

    if history_path.exists():
        content = history_path.read_text()
        # Find end of header (after the separator line)
        lines = content.split("\n")
        header_end = 0
        for i, line in enumerate(lines):
            if line.startswith("|---"):
                header_end = i + 1
                break

        header = "\n".join(lines[:header_end])
        existing_rows = "\n".join(lines[header_end:])
    else:
        header = HISTORY_HEADER.rstrip()
        existing_rows = ""

    new_content = header + "\n" + "\n".join(new_rows)
    if existing_rows.strip():
        new_content += "\n" + existing_rows.strip("\n")
    new_content += "\n"

    history_path.write_text(new_content)
    print(f"History updated: {history_path}")


# ============================================================================
# Main entry point
# ============================================================================

def main():
    if len(sys.argv) < 2:
        print("Usage: python3 -m tarai.history_updater <results_dir>")
        sys.exit(1)

    results_dir = Path(sys.argv[1])
    if not results_dir.exists():
        print(f"Error: Results directory not found: {results_dir}")
        sys.exit(1)

    # Results live in benchmarks/results/<run>/
    benchmarks_dir = results_dir.parent.parent

    latest = mean_micros(load_results(results_dir))
    if not latest:
        print("No benchmark results found, skipping updates.")
        sys.exit(0)

    metadata = get_run_metadata(results_dir)
    update_results_file(benchmarks_dir, latest, metadata)
    append_to_history(benchmarks_dir, latest, metadata)


if __name__ == "__main__":
    main()
