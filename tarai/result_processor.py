#!/usr/bin/env python3
"""
Process Tarai benchmark results and generate summary reports.
Usage: python3 -m tarai.result_processor <results_dir>
"""

import json
import sys
from pathlib import Path

from .variants import BASELINE, VARIANTS


def load_results(results_dir: Path) -> dict:
    """Load all hyperfine-style JSON results from the results directory."""
    results = {}
    for json_file in results_dir.glob("*_hyperfine.json"):
        case_name = json_file.stem.replace("_hyperfine", "")
        with open(json_file) as f:
            results[case_name] = json.load(f)
    return results


def extract_times(case_result: dict) -> list[dict]:
    """Extract timing information from a case result, fastest first."""
    times = []
    for result in case_result.get("results", []):
        times.append({
            "name": result["command"],
            "variant": result.get("variant", result["command"].split(" ")[0]),
            "mean": result["mean"],
            "stddev": result["stddev"],
            "min": result["min"],
            "max": result["max"],
            "median": result["median"],
        })
    return sorted(times, key=lambda x: x["mean"])


def format_time(seconds: float) -> str:
    """Format time in human-readable format."""
    if seconds < 0.001:
        return f"{seconds * 1_000_000:.1f} us"
    elif seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    else:
        return f"{seconds:.2f} s"


def format_ratio(ratio: float) -> str:
    if ratio < 1:
        return f"{ratio:.2f}x (faster)"
    elif ratio > 1:
        return f"{ratio:.1f}x slower"
    else:
        return "baseline"


def generate_summary(results: dict, output_dir: Path) -> list[str]:
    """Generate a markdown summary of all benchmark results."""
    lines = [
        "# Tarai Benchmark Results",
        "",
        f"Generated: {output_dir.name}",
        "",
    ]

    run_info = output_dir / "run_info.txt"
    if run_info.exists():
        info = run_info.read_text().strip().split("\n")
        lines.append(f"tarai version: `{info[0]}`")
        if len(info) > 1:
            lines.append(f"Interpreter: {info[1]}")
        lines.append("")

    for case_name, case_result in sorted(results.items()):
        lines.append(f"## {case_name}")
        lines.append("")

        times = extract_times(case_result)
        if not times:
            lines.append("No results available.")
            lines.append("")
            continue

        # Naive recursion is the baseline; fall back to the fastest variant
        baseline = None
        for t in times:
            if t["variant"] == BASELINE:
                baseline = t
                break
        if baseline is None:
            baseline = times[0]

        lines.append("| Variant | Mean | Stddev | vs Baseline |")
        lines.append("|---------|------|--------|-------------|")

        for t in times:
            variant = VARIANTS.get(t["variant"])
            label = variant.label if variant else t["name"]
            ratio = t["mean"] / baseline["mean"] if baseline["mean"] > 0 else 1.0
            ratio_str = "baseline" if t is baseline else format_ratio(ratio)

            lines.append(
                f"| {label} | {format_time(t['mean'])} | "
                f"+/- {format_time(t['stddev'])} | {ratio_str} |"
            )

        lines.append("")

    summary_path = output_dir / "summary.md"
    summary_path.write_text("\n".join(lines))
    print(f"Summary written to: {summary_path}")

    print("")
    print("=" * 60)
    for line in lines:
        print(line)

    return lines


def main():
    if len(sys.argv) < 2:
        print("Usage: python3 -m tarai.result_processor <results_dir>")
        sys.exit(1)

    results_dir = Path(sys.argv[1])
    if not results_dir.exists():
        print(f"Error: Results directory not found: {results_dir}")
        sys.exit(1)

    results = load_results(results_dir)
    if not results:
        print("No benchmark results found.")
        sys.exit(0)

    generate_summary(results, results_dir)


if __name__ == "__main__":
    main()
