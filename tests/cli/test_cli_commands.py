import importlib.metadata
import json
from collections import namedtuple

import pytest
from typer.testing import CliRunner

from devinfo.cli.main import app

runner = CliRunner()

VirtualMemory = namedtuple("VirtualMemory", ["total"])


@pytest.mark.parametrize("command, expected_output_substring", [
    (["--help"], "Usage"),
    (["info", "--help"], "--json"),
    (["cpu", "--help"], "logical CPU cores"),
    (["ram", "--help"], "megabytes"),
    (["doctor", "--help"], "psutil"),
    (["version", "--help"], "version"),
])
def test_commands_help_output(command, expected_output_substring):
    result = runner.invoke(app, command)
    assert result.exit_code == 0
    assert expected_output_substring in result.output


def test_unknown_command_fails():
    result = runner.invoke(app, ["nonexistent-command"])
    assert result.exit_code != 0


def test_cpu_command(fake_host):
    result = runner.invoke(app, ["cpu"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "4"


def test_ram_command(fake_host):
    result = runner.invoke(app, ["ram"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "8000"


def test_ram_command_unknown(make_cpu_dir, tmp_path, monkeypatch):
    monkeypatch.setenv("DEVINFO_CPU_DIR", str(make_cpu_dir("cpu0")))
    monkeypatch.setenv("DEVINFO_MEMINFO_PATH", str(tmp_path / "missing"))

    result = runner.invoke(app, ["ram"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "0"


def test_info_json(fake_host, monkeypatch, tmp_path):
    monkeypatch.setenv("DEVINFO_DMI_DIR", str(tmp_path / "no-dmi"))

    result = runner.invoke(app, ["info", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["os_name"] == "linux"
    assert data["cpu_core_count"] == 4
    assert data["total_ram_megabytes"] == 8000
    assert data["manufacturer"] == "unknown"


def test_info_table(fake_host):
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "Device Information" in result.stdout
    assert "cpu_core_count" in result.stdout
    assert "8000 MB" in result.stdout


def test_doctor_passes_when_psutil_agrees(fake_host, mocker):
    mocker.patch("psutil.cpu_count", return_value=4)
    mocker.patch("psutil.virtual_memory", return_value=VirtualMemory(total=8192000 * 1024))

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 0
    assert "All checks PASSED!" in result.stdout


def test_doctor_fails_on_cpu_mismatch(fake_host, mocker):
    mocker.patch("psutil.cpu_count", return_value=16)
    mocker.patch("psutil.virtual_memory", return_value=VirtualMemory(total=8192000 * 1024))

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
    assert "Detected 4 core(s), psutil reports 16." in result.stdout


def test_doctor_fails_when_ram_unknown(make_cpu_dir, tmp_path, monkeypatch, mocker):
    monkeypatch.setenv("DEVINFO_CPU_DIR", str(make_cpu_dir("cpu0")))
    monkeypatch.setenv("DEVINFO_MEMINFO_PATH", str(tmp_path / "missing"))
    mocker.patch("psutil.cpu_count", return_value=1)

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
    assert "Total RAM could not be determined." in result.stdout


def test_version_installed(mocker):
    mocker.patch("importlib.metadata.version", return_value="0.1.0")

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "devinfo version: 0.1.0" in result.stdout


def test_version_not_installed(mocker):
    mocker.patch("importlib.metadata.version", side_effect=importlib.metadata.PackageNotFoundError("devinfo"))

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 1
    assert "not installed" in result.stdout
