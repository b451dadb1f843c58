import io

import pytest

from stencilbench import cli, jacobi1d, seidel2d
from stencilbench.arrays import Dataset


def test_dump_matches_module_output(capsys):
    code = cli.main(["jacobi-1d-imper", "--dataset", "mini", "--dump"])
    captured = capsys.readouterr()
    expected = io.StringIO()
    jacobi1d.run(Dataset.MINI, stream=expected)
    assert code == 0
    assert captured.err == expected.getvalue()
    assert captured.out == ""


def test_no_output_without_timer_or_dump(capsys):
    code = cli.main(["seidel-2d", "--dataset", "mini"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "" and captured.err == ""


def test_wall_timer_report_format(capsys):
    code = cli.main(
        ["jacobi-2d-imper", "--dataset", "mini", "--timer", "wall", "--no-flush"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert out.endswith("\n")
    assert out.count("\n") == 1
    whole, fraction = out.strip().split(".")
    assert len(fraction) == 6
    assert fraction.isdigit()
    assert float(out) >= 0.0


def test_cycle_timer_reports_integer(capsys):
    code = cli.main(
        ["template", "--dataset", "mini", "--timer", "cycles", "--no-flush"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert out.endswith("\n")
    assert out.count("\n") == 1
    assert out.strip().isdigit()
    assert int(out) >= 0


def test_gflops_without_flops_warns(capsys):
    cli.main(["adi", "--dataset", "mini", "--timer", "gflops", "--no-flush"])
    out = capsys.readouterr().out
    assert out.startswith("[PolyBench][WARNING]")
    assert len(out.splitlines()) == 2


def test_dataset_name_forms_accepted(capsys):
    cli.main(["seidel-2d", "--dataset", "MINI_DATASET", "--dump"])
    err = capsys.readouterr().err
    expected = io.StringIO()
    seidel2d.run(Dataset.MINI, stream=expected)
    assert err == expected.getvalue()


def test_unknown_dataset_is_an_error():
    with pytest.raises(SystemExit) as info:
        cli.main(["adi", "--dataset", "enormous"])
    assert info.value.code == 2


def test_unknown_benchmark_is_an_error():
    with pytest.raises(SystemExit) as info:
        cli.main(["matmul"])
    assert info.value.code == 2


def test_negative_cache_size_is_an_error():
    with pytest.raises(SystemExit) as info:
        cli.main(["adi", "--dataset", "mini", "--cache-size-kb", "-1"])
    assert info.value.code == 2