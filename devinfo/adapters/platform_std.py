"""
PlatformInfoProvider backed by the standard library and the DMI identity
files the kernel exposes under sysfs.
"""
import platform
import sysconfig
from pathlib import Path
from typing import Optional

from devinfo.internal import paths

# Lowercase to match the platform keys used across devinfo output, so it
# intentionally differs from platform.system()'s "Linux".
OS_NAME = "linux"
UNKNOWN = "unknown"


class StdPlatformInfoProvider:
    """
    Uncached pass-throughs to platform-provided values.
    """

    def __init__(self, dmi_dir: Optional[Path] = None):
        self.dmi_dir = Path(dmi_dir) if dmi_dir is not None else paths.get_dmi_dir()

    def os_name(self) -> str:
        return OS_NAME

    def os_version(self) -> str:
        return platform.release()

    def os_release(self) -> str:
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            return UNKNOWN
        return release.get("VERSION_ID") or release.get("VERSION") or UNKNOWN

    def manufacturer(self) -> str:
        return self._read_dmi("sys_vendor")

    def model(self) -> str:
        return self._read_dmi("product_name")

    def hardware(self) -> str:
        return platform.processor() or platform.machine()

    def cpu_arch(self) -> str:
        return platform.machine()

    def cpu_arch_abi(self) -> str:
        multiarch = sysconfig.get_config_var("MULTIARCH")
        if multiarch:
            return multiarch
        bits, _ = platform.architecture()
        return f"{platform.machine()}-{bits}"

    def _read_dmi(self, name: str) -> str:
        try:
            value = (self.dmi_dir / name).read_text(encoding="utf-8", errors="replace").strip()
        except OSError:
            return UNKNOWN
        return value or UNKNOWN
