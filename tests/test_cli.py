import json

import pytest
from click.testing import CliRunner

from ipv4calc.config import CalcConfig, set_config
from ipv4calc.ip.cli import main


@pytest.fixture
def runner(monkeypatch):
    # keep rich from emitting colour codes into captured output
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("COLUMNS", "100")
    return CliRunner()


def labels(output):
    return [line.split()[0] for line in output.splitlines() if line.strip()]


def test_cidr_summary(runner):
    result = runner.invoke(main, ["192.168.0.1/24"])
    assert result.exit_code == 0
    assert labels(result.output) == ["Address", "CIDR", "Netmask", "Network", "Broadcast", "Range", "Class"]
    assert "192.168.0.1/24" in result.output
    assert "255.255.255.0" in result.output
    assert "192.168.0.255" in result.output
    assert "192.168.0.1 to 192.168.0.254" in result.output

    class_line = [line for line in result.output.splitlines() if line.strip()][-1].split()
    assert class_line == ["Class", "C"]


def test_single_host(runner):
    result = runner.invoke(main, ["127.0.0.1"])
    assert result.exit_code == 0
    lines = {line.split()[0]: line.split()[1:] for line in result.output.splitlines() if line.strip()}
    assert lines["CIDR"] == ["127.0.0.1/32"]
    assert lines["Range"] == ["N/A"]
    assert lines["Class"] == ["N/A"]


def test_json_output(runner):
    result = runner.invoke(main, ["10.20.30.40/10", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["network"] == "10.0.0.0"
    assert data["broadcast"] == "10.63.255.255"
    assert data["netmask"] == "255.192.0.0"
    assert data["class_name"] == "A"
    assert data["is_private"] is True
    assert data["num_addresses"] == 2 ** 22


def test_json_from_config(runner):
    set_config(CalcConfig(output_json=True))
    result = runner.invoke(main, ["8.8.8.8"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["is_private"] is False
    assert data["reverse_dns"] == "8.8.8.8.in-addr.arpa"
    assert data["first_host"] is None


@pytest.mark.parametrize("arg, message", [
    ("a.b.c.d", "not a valid IPv4 address"),
    ("127.0.0.1/a", "prefix must be 0-32"),
    ("127.0.0.1/33", "prefix must be 0-32"),
    ("\udcff.1.1.1", "not a valid IPv4 address"),
    ("1.2.3.4\x00/24", "not a valid IPv4 address"),
])
def test_invalid_input(runner, arg, message):
    result = runner.invoke(main, [arg])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert result.stdout == ""
    assert "Error:" in result.stderr
    assert message in result.stderr


def test_requires_exactly_one_argument(runner):
    assert runner.invoke(main, []).exit_code == 2
    assert runner.invoke(main, ["10.0.0.1", "10.0.0.2"]).exit_code == 2


def test_log_file(runner, tmp_path):
    log_file = tmp_path / "logs" / "calc.log"
    result = runner.invoke(main, ["192.168.0.1/24", "--log-file", str(log_file)])
    assert result.exit_code == 0
    assert "Parsed '192.168.0.1/24'" in log_file.read_text()


def test_log_file_from_config(runner, tmp_path):
    log_file = tmp_path / "calc.log"
    set_config(CalcConfig(log_file=str(log_file)))
    result = runner.invoke(main, ["a.b.c.d"])
    assert result.exit_code == 1
    assert "Rejected 'a.b.c.d'" in log_file.read_text()
