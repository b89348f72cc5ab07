import os
from pathlib import Path


# ---------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory.

    - Windows: %APPDATA%\\devinfo
    - Linux/macOS: ~/.devinfo
    """
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", str(Path.home()))
        path = Path(base) / "devinfo"
    else:  # Linux / macOS
        path = Path.home() / ".devinfo"

    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_file() -> Path:
    """
    JSON log file used when the CLI enables file logging.
    """
    log_dir = get_app_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "devinfo.log.json"


# ---------------------------------------------------------------------
# Kernel pseudo-filesystems
# ---------------------------------------------------------------------

def get_cpu_sysfs_dir() -> Path:
    """
    Directory exposing one cpuN entry per logical CPU.
    """
    return Path(os.environ.get("DEVINFO_CPU_DIR", "/sys/devices/system/cpu"))


def get_meminfo_path() -> Path:
    return Path(os.environ.get("DEVINFO_MEMINFO_PATH", "/proc/meminfo"))


def get_dmi_dir() -> Path:
    return Path(os.environ.get("DEVINFO_DMI_DIR", "/sys/devices/virtual/dmi/id"))


# ---------------------------------------------------------------------
# Debug
# ---------------------------------------------------------------------

if __name__ == "__main__":
    print("App Data Dir:", get_app_data_dir())
    print("Log File:", get_log_file())
    print("CPU sysfs Dir:", get_cpu_sysfs_dir())
    print("Meminfo Path:", get_meminfo_path())
    print("DMI Dir:", get_dmi_dir())
