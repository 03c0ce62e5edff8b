import subprocess
import sys

import pytest

from thermocouple_convert import __version__
from thermocouple_convert.__main__ import main


def test_cli_version():
    cmd = [sys.executable, "-m", "thermocouple_convert", "--version"]
    assert subprocess.check_output(cmd).decode().strip() == __version__


def test_cli_convert():
    cmd = [sys.executable, "-m", "thermocouple_convert", "K", "10.0", "25.0"]
    output = subprocess.check_output(cmd).decode().strip()
    assert float(output) == pytest.approx(270.72, abs=0.05)


def test_cli_out_of_range():
    cmd = [sys.executable, "-m", "thermocouple_convert", "K", "100.0"]
    result = subprocess.run(cmd, capture_output=True)
    assert result.returncode == 1
    assert b"outside the calibrated range" in result.stderr


@pytest.mark.parametrize("tc_type", ["t", "T"])
def test_main_lowercase_type(tc_type, capsys):
    main([tc_type, "9.288"])
    assert float(capsys.readouterr().out) == pytest.approx(200.0, abs=0.1)


def test_main_single_precision(capsys):
    main(["--single", "K", "10.0", "25.0"])
    assert float(capsys.readouterr().out) == pytest.approx(270.72, abs=0.05)


def test_main_negative_millivolts(capsys):
    main(["K", "-3.554"])
    # Cold junction at 0 degC adds a fraction of a uV
    assert float(capsys.readouterr().out) == pytest.approx(-100.0, abs=0.1)


def test_main_unknown_type():
    with pytest.raises(SystemExit) as excinfo:
        main(["X", "1.0"])
    assert excinfo.value.code == 2
