from typing import Protocol
from dataclasses import dataclass, asdict


class PlatformInfoProvider(Protocol):
    """
    Static, uncached descriptors of the host platform.
    Implementations pass values through from the platform; they do no
    computation and keep no state.
    """

    def os_name(self) -> str:
        ...

    def os_version(self) -> str:
        ...

    def os_release(self) -> str:
        ...

    def manufacturer(self) -> str:
        ...

    def model(self) -> str:
        ...

    def hardware(self) -> str:
        ...

    def cpu_arch(self) -> str:
        ...

    def cpu_arch_abi(self) -> str:
        ...


class MetricsReader(Protocol):
    """
    Lazily computed, process-lifetime hardware facts.
    Both methods are best-effort and never raise: 1 core and 0 MB mean
    "unknown", not a measurement.
    """

    def get_cpu_core_count(self) -> int:
        ...

    def get_total_ram_megabytes(self) -> int:
        ...


@dataclass(frozen=True)
class DeviceSnapshot:
    """
    Point-in-time view of every descriptor and metric.
    """
    os_name: str
    os_version: str
    os_release: str
    manufacturer: str
    model: str
    hardware: str
    cpu_arch: str
    cpu_arch_abi: str
    cpu_core_count: int
    total_ram_megabytes: int

    def to_dict(self) -> dict:
        return asdict(self)
