import logging

import pytest

from integralanalysis.main import main


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("integralanalysis")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "x_squared" in out
    assert "dirichlet" in out


def test_summary_output(capsys):
    assert main(["linear", "-n", "10", "-l", "4"]) == 0
    out = capsys.readouterr().out
    assert "Riemann (midpoint, n=10)" in out
    assert "Integral of mu(t)" in out


def test_fine_mode(capsys):
    assert main(["x_squared", "--fine", "--rule", "left"]) == 0
    assert "n=1000" in capsys.readouterr().out


def test_dirichlet_is_explained_not_sampled(capsys):
    assert main(["dirichlet"]) == 2
    assert "cannot be sampled" in capsys.readouterr().out


def test_invalid_partitions(capsys):
    assert main(["linear", "-n", "0"]) == 1
    assert "partitions" in capsys.readouterr().err


def test_plot(tmp_path):
    path = tmp_path / "plots" / "step.png"
    assert main(["step", "-n", "8", "-l", "5", "--plot", str(path)]) == 0
    assert path.exists()
    assert path.stat().st_size > 0


def test_results_stay_on_stdout_when_verbose(capsys):
    assert main(["linear", "-n", "4", "-l", "2", "-vv"]) == 0
    captured = capsys.readouterr()
    assert "Riemann (midpoint, n=4)" in captured.out
    assert "DEBUG" not in captured.out
    assert "DEBUG" in captured.err


def test_log_file_keeps_debug_records(tmp_path, capsys):
    path = tmp_path / "logs" / "run.log"
    assert main(["linear", "-n", "4", "-l", "2", "--log-file", str(path)]) == 0
    assert capsys.readouterr().err == ""
    assert "Riemann sum (midpoint, n=4)" in path.read_text(encoding="utf-8")
