"""
Lazy, memoized readers for CPU core count and total RAM.

Values come from the kernel pseudo-filesystems and are treated as immutable
hardware facts: computed at most once per reader, never invalidated.
Cache slots are written without a lock. Concurrent first calls may both
compute, but the computation is deterministic so every writer stores the
same int and a reader never sees a partial value.
"""
import itertools
import os
import re
from pathlib import Path
from typing import Optional

from devinfo.internal import paths
from devinfo.internal.logging import get_logger

logger = get_logger(__name__)

CPU_ENTRY_PATTERN = re.compile(r"cpu[0-9]+")
MEMTOTAL_PATTERN = re.compile(r"MemTotal:\s+(\d+)\s+kB")
MEMINFO_LOOKAHEAD_LINES = 3

# Sentinels. Core count is unset while <= 0, RAM while < 0 (0 is "unknown").
_CPU_UNSET = 0
_RAM_UNSET = -1
DEFAULT_CPU_CORE_COUNT = 1
UNKNOWN_RAM_MEGABYTES = 0


class SystemMetricsReader:
    """
    Reads CPU core count and total RAM once and serves them from cache.
    Paths default to the host's sysfs/procfs and can be injected for tests.
    """

    def __init__(self, cpu_dir: Optional[Path] = None, meminfo_path: Optional[Path] = None):
        self.cpu_dir = Path(cpu_dir) if cpu_dir is not None else paths.get_cpu_sysfs_dir()
        self.meminfo_path = Path(meminfo_path) if meminfo_path is not None else paths.get_meminfo_path()
        self._cpu_core_count = _CPU_UNSET
        self._total_ram_megabytes = _RAM_UNSET

    # -----------------------------------------------------------------
    # CPU
    # -----------------------------------------------------------------

    def get_cpu_core_count(self) -> int:
        cached = self._cpu_core_count
        if cached > _CPU_UNSET:
            return cached

        count = self._count_cpu_entries()
        if self._cpu_core_count <= _CPU_UNSET:
            self._cpu_core_count = count
        return self._cpu_core_count

    def _count_cpu_entries(self) -> int:
        try:
            entries = os.listdir(self.cpu_dir)
        except OSError as e:
            logger.warning(
                "Could not list CPU directory, assuming a single core",
                path=str(self.cpu_dir),
                error=str(e),
            )
            return DEFAULT_CPU_CORE_COUNT

        count = sum(1 for name in entries if CPU_ENTRY_PATTERN.fullmatch(name))
        # An empty match set would poison the cache sentinel
        if count <= 0:
            logger.warning("No cpuN entries found, assuming a single core", path=str(self.cpu_dir))
            return DEFAULT_CPU_CORE_COUNT
        return count

    # -----------------------------------------------------------------
    # RAM
    # -----------------------------------------------------------------

    def get_total_ram_megabytes(self) -> int:
        cached = self._total_ram_megabytes
        if cached > _RAM_UNSET:
            return cached

        megabytes = self._read_memtotal_megabytes()
        if self._total_ram_megabytes <= _RAM_UNSET:
            self._total_ram_megabytes = megabytes
        return self._total_ram_megabytes

    def _read_memtotal_megabytes(self) -> int:
        try:
            with open(self.meminfo_path, "r", encoding="ascii") as f:
                for line in itertools.islice(f, MEMINFO_LOOKAHEAD_LINES):
                    if not line.startswith("MemTotal"):
                        continue
                    match = MEMTOTAL_PATTERN.fullmatch(line.rstrip())
                    if not match:
                        logger.warning(
                            "Unexpected MemTotal format",
                            path=str(self.meminfo_path),
                            line=line.rstrip("\n"),
                        )
                        return UNKNOWN_RAM_MEGABYTES
                    return int(match.group(1)) // 1024
        except (OSError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            logger.warning("Could not read memory info", path=str(self.meminfo_path), error=str(e))
            return UNKNOWN_RAM_MEGABYTES

        logger.debug(
            "MemTotal not found in leading lines",
            path=str(self.meminfo_path),
            lookahead=MEMINFO_LOOKAHEAD_LINES,
        )
        return UNKNOWN_RAM_MEGABYTES


# ---------------------------------------------------------------------
# Process-wide default reader
# ---------------------------------------------------------------------

_default_reader: Optional[SystemMetricsReader] = None


def get_default_reader() -> SystemMetricsReader:
    global _default_reader
    reader = _default_reader
    if reader is None:
        reader = SystemMetricsReader()
        _default_reader = reader
    return reader


def reset_default_reader() -> None:
    global _default_reader
    _default_reader = None


def get_cpu_core_count() -> int:
    return get_default_reader().get_cpu_core_count()


def get_total_ram_megabytes() -> int:
    return get_default_reader().get_total_ram_megabytes()


if __name__ == "__main__":
    print(f"CPU cores: {get_cpu_core_count()}")
    print(f"Total RAM: {get_total_ram_megabytes()} MB")
