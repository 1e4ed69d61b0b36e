#!/usr/bin/env python3
"""
Time every Tarai variant on the fixed benchmark cases.

Writes one <case>_hyperfine.json per case (same layout hyperfine uses, so
result_processor.py and history_updater.py can read it) plus run_info.txt.

Usage: python3 -m tarai.runner <results_dir> [--iterations N] [--variant NAME ...] [--case NAME ...]
"""

import json
import os
import platform
import statistics
import sys
import time
from pathlib import Path

from . import __version__
from .variants import CASES, VARIANTS, Case, Variant, get_variant

DEFAULT_ITERATIONS = 10
RUN_INFO_FILE = "run_info.txt"

USAGE = (
    "Usage: python3 -m tarai.runner <results_dir> "
    "[--iterations N] [--variant NAME ...] [--case NAME ...]"
)


class ResultMismatchError(AssertionError):
    """A variant returned something other than the case's expected output."""


def time_variant(variant: Variant, case: Case, iterations: int, warmup: int = 1) -> dict:
    """Time one variant on one case.

    Each iteration is a fresh top-level call, so the memo table and deferred
    values of one iteration are never seen by the next.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    x, y, z = case.args
    for _ in range(warmup):
        variant.evaluate(x, y, z)

    times = []
    output = None
    for _ in range(iterations):
        start = time.perf_counter()
        output = variant.evaluate(x, y, z)
        times.append(time.perf_counter() - start)
        if output != case.expected:
            raise ResultMismatchError(
                f"{variant.name} {case.name}: expected {case.expected}, got {output}"
            )

    return {
        "command": f"{variant.name} {case.name}",
        "variant": variant.name,
        "output": output,
        "mean": statistics.mean(times),
        "stddev": statistics.stdev(times) if len(times) > 1 else 0.0,
        "median": statistics.median(times),
        "min": min(times),
        "max": max(times),
        "times": times,
    }


def run_case(case: Case, variants: list[Variant], iterations: int) -> dict:
    """Run all variants on a case and return a hyperfine-style document."""
    results = []
    for variant in variants:
        print(f"  {case.name}: {variant.name} ({iterations} iterations)")
        results.append(time_variant(variant, case, iterations))
    return {"results": results}


def write_results(results_dir: Path, documents: dict):
    """Write <case>_hyperfine.json for each case plus run_info.txt."""
    results_dir.mkdir(parents=True, exist_ok=True)
    for case_name, document in documents.items():
        json_path = results_dir / f"{case_name}_hyperfine.json"
        with open(json_path, "w") as f:
            json.dump(document, f, indent=2)

    run_info = results_dir / RUN_INFO_FILE
    run_info.write_text(
        f"{__version__}\n"
        f"{platform.python_implementation()} {platform.python_version()}\n"
    )


def parse_args(argv: list[str]) -> dict:
    """Parse command-line arguments into a small options dict.

    Raises ValueError on anything malformed.
    """
    options = {
        "results_dir": None,
        "iterations": int(os.environ.get("TARAI_ITERATIONS", DEFAULT_ITERATIONS)),
        "variants": [],
        "cases": [],
    }

    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg in ("--iterations", "--variant", "--case"):
            if not args:
                raise ValueError(f"{arg} needs a value")
            value = args.pop(0)
            if arg == "--iterations":
                options["iterations"] = int(value)
            elif arg == "--variant":
                options["variants"].append(value)
            else:
                options["cases"].append(value)
        elif arg.startswith("--"):
            raise ValueError(f"unknown option {arg}")
        elif options["results_dir"] is None:
            options["results_dir"] = Path(arg)
        else:
            raise ValueError(f"unexpected argument {arg}")

    if options["results_dir"] is None:
        raise ValueError("missing results directory")
    if options["iterations"] < 1:
        raise ValueError(f"iterations must be at least 1, got {options['iterations']}")
    return options


def main():
    try:
        options = parse_args(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print(USAGE)
        sys.exit(1)

    try:
        variants = [get_variant(name) for name in options["variants"] or VARIANTS]
    except KeyError as e:
        print(f"Error: {e}")
        sys.exit(1)

    unknown = [name for name in options["cases"] if name not in CASES]
    if unknown:
        print(f"Error: unknown case {unknown[0]!r} (known: {', '.join(CASES)})")
        sys.exit(1)
    cases = [CASES[name] for name in options["cases"] or CASES]

    print(f"Running {len(variants)} variants on {len(cases)} cases")
    documents = {}
    for case in cases:
        try:
            documents[case.name] = run_case(case, variants, options["iterations"])
        except ResultMismatchError as e:
            print(f"Error: {e}")
            sys.exit(1)

    write_results(options["results_dir"], documents)
    print(f"Results written to: {options['results_dir']}")


if __name__ == "__main__":
    main()
