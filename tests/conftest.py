import pytest
from unittest.mock import patch

from devinfo.runtime import system


# --- Fake kernel trees ---

@pytest.fixture
def make_cpu_dir(tmp_path):
    """
    Returns a factory creating a fake /sys/devices/system/cpu directory
    containing the given entry names.
    """
    def _make(*names):
        cpu_dir = tmp_path / "cpu"
        cpu_dir.mkdir(exist_ok=True)
        for name in names:
            (cpu_dir / name).mkdir()
        return cpu_dir
    return _make


@pytest.fixture
def make_meminfo(tmp_path):
    """
    Returns a factory writing a fake /proc/meminfo with the given lines.
    """
    def _make(*lines):
        meminfo = tmp_path / "meminfo"
        meminfo.write_text("".join(f"{line}\n" for line in lines))
        return meminfo
    return _make


@pytest.fixture
def fake_host(make_cpu_dir, make_meminfo, monkeypatch):
    """
    Points the default reader at a fake 4-core, 8000 MB host.
    """
    cpu_dir = make_cpu_dir("cpu0", "cpu1", "cpu2", "cpu3", "cpufreq", "cpuidle", "online")
    meminfo = make_meminfo(
        "MemTotal:        8192000 kB",
        "MemFree:         4096000 kB",
        "MemAvailable:    6144000 kB",
    )
    monkeypatch.setenv("DEVINFO_CPU_DIR", str(cpu_dir))
    monkeypatch.setenv("DEVINFO_MEMINFO_PATH", str(meminfo))
    return cpu_dir, meminfo


@pytest.fixture(autouse=True)
def fresh_default_reader():
    """Each test starts without a memoized process-wide reader."""
    system.reset_default_reader()
    yield
    system.reset_default_reader()


@pytest.fixture(autouse=True)
def unconfigured_logging():
    """Let setup_logging run again in every test."""
    with patch("devinfo.internal.logging._LOGGING_CONFIGURED", False):
        yield
