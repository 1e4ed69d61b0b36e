import json

import pytest

from tarai import runner
from tarai.runner import ResultMismatchError, parse_args, run_case, time_variant, write_results
from tarai.variants import VARIANTS, Case, Variant

SMALL = Case("case_4_2_0", (4, 2, 0), 4)


def test_time_variant_shape():
    result = time_variant(VARIANTS["memo"], SMALL, iterations=3)
    assert result["command"] == "memo case_4_2_0"
    assert result["variant"] == "memo"
    assert result["output"] == 4
    assert len(result["times"]) == 3
    assert result["min"] <= result["median"] <= result["max"]
    assert result["min"] <= result["mean"] <= result["max"]
    assert result["stddev"] >= 0


def test_time_variant_single_iteration_has_zero_stddev():
    result = time_variant(VARIANTS["naive"], SMALL, iterations=1, warmup=0)
    assert result["stddev"] == 0.0


def test_each_iteration_is_a_fresh_call():
    calls = []

    def recording(x, y, z):
        calls.append((x, y, z))
        return VARIANTS["memo"].evaluate(x, y, z)

    variant = Variant("recording", "Recording", recording)
    time_variant(variant, SMALL, iterations=5, warmup=2)
    assert calls == [(4, 2, 0)] * 7


def test_mismatch_is_reported():
    variant = Variant("broken", "Broken", lambda x, y, z: y)
    with pytest.raises(ResultMismatchError, match="broken case_4_2_0: expected 4, got 2"):
        time_variant(variant, SMALL, iterations=2)


def test_iterations_must_be_positive():
    with pytest.raises(ValueError):
        time_variant(VARIANTS["memo"], SMALL, iterations=0)


def test_run_case_and_write_results(tmp_path, capsys):
    document = run_case(SMALL, list(VARIANTS.values()), iterations=2)
    assert [r["variant"] for r in document["results"]] == list(VARIANTS)

    out = tmp_path / "2026-10-19_120000"
    write_results(out, {SMALL.name: document})
    with open(out / "case_4_2_0_hyperfine.json") as f:
        assert json.load(f) == document

    info = (out / "run_info.txt").read_text().split("\n")
    assert info[0] == "0.1.0"
    assert "case_4_2_0: lazy_enum" in capsys.readouterr().out


def test_parse_args_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("TARAI_ITERATIONS", raising=False)
    options = parse_args([str(tmp_path)])
    assert options["results_dir"] == tmp_path
    assert options["iterations"] == runner.DEFAULT_ITERATIONS
    assert options["variants"] == []


def test_parse_args_flags(monkeypatch):
    monkeypatch.setenv("TARAI_ITERATIONS", "4")
    options = parse_args(["out", "--variant", "memo", "--variant", "lazy_enum", "--case", "case_10_5_0"])
    assert options["iterations"] == 4
    assert options["variants"] == ["memo", "lazy_enum"]
    assert options["cases"] == ["case_10_5_0"]
    assert parse_args(["out", "--iterations", "2"])["iterations"] == 2


@pytest.mark.parametrize("argv", [
    [],
    ["out", "--iterations"],
    ["out", "--iterations", "0"],
    ["out", "--bogus"],
    ["out", "extra"],
])
def test_parse_args_errors(argv):
    with pytest.raises(ValueError):
        parse_args(argv)


def test_main_writes_results(tmp_path, monkeypatch, capsys):
    out = tmp_path / "run"
    monkeypatch.setattr("sys.argv", [
        "runner", str(out), "--iterations", "1",
        "--variant", "lazy_closure", "--variant", "lazy_enum",
    ])
    runner.main()
    assert sorted(p.name for p in out.iterdir()) == [
        "case_10_5_0_hyperfine.json",
        "case_12_6_0_hyperfine.json",
        "run_info.txt",
    ]
    assert "Results written to" in capsys.readouterr().out


def test_main_unknown_variant(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["runner", str(tmp_path), "--variant", "nope"])
    with pytest.raises(SystemExit) as excinfo:
        runner.main()
    assert excinfo.value.code == 1
    assert "unknown variant 'nope'" in capsys.readouterr().out


def test_main_unknown_case(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["runner", str(tmp_path), "--case", "case_1_1_1"])
    with pytest.raises(SystemExit) as excinfo:
        runner.main()
    assert excinfo.value.code == 1
    assert "unknown case 'case_1_1_1'" in capsys.readouterr().out
