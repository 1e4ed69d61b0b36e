import json

import pytest


def timing(variant, case, mean, stddev=0.0):
    return {
        "command": f"{variant} {case}",
        "variant": variant,
        "output": 10,
        "mean": mean,
        "stddev": stddev,
        "median": mean,
        "min": mean,
        "max": mean,
        "times": [mean],
    }


@pytest.fixture
def results_dir(tmp_path):
    """A benchmarks/results/<run>/ tree holding one finished run."""
    run = tmp_path / "benchmarks" / "results" / "2026-10-19_093000"
    run.mkdir(parents=True)
    document = {
        "results": [
            timing("naive", "case_10_5_0", 0.2, 0.01),
            timing("memo", "case_10_5_0", 0.002),
            timing("lazy_closure", "case_10_5_0", 0.0001),
            timing("lazy_enum", "case_10_5_0", 0.0002),
        ]
    }
    with open(run / "case_10_5_0_hyperfine.json", "w") as f:
        json.dump(document, f)
    (run / "run_info.txt").write_text("0.1.0\nCPython 3.12.1\n")
    return run
