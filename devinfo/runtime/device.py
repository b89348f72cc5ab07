from devinfo.kernel.contracts import DeviceSnapshot, MetricsReader, PlatformInfoProvider


class DeviceInfo:
    """
    Single entry point combining static platform descriptors with the
    memoized hardware metrics.
    Callers construct one instance and pass it around; tests build their
    own with fake providers.
    """

    def __init__(self, provider: PlatformInfoProvider, reader: MetricsReader):
        self._provider = provider
        self._reader = reader

    def os_name(self) -> str:
        return self._provider.os_name()

    def os_version(self) -> str:
        return self._provider.os_version()

    def os_release(self) -> str:
        return self._provider.os_release()

    def manufacturer(self) -> str:
        return self._provider.manufacturer()

    def model(self) -> str:
        return self._provider.model()

    def hardware(self) -> str:
        return self._provider.hardware()

    def cpu_arch(self) -> str:
        return self._provider.cpu_arch()

    def cpu_arch_abi(self) -> str:
        return self._provider.cpu_arch_abi()

    def cpu_core_count(self) -> int:
        return self._reader.get_cpu_core_count()

    def total_ram_megabytes(self) -> int:
        return self._reader.get_total_ram_megabytes()

    def snapshot(self) -> DeviceSnapshot:
        return DeviceSnapshot(
            os_name=self.os_name(),
            os_version=self.os_version(),
            os_release=self.os_release(),
            manufacturer=self.manufacturer(),
            model=self.model(),
            hardware=self.hardware(),
            cpu_arch=self.cpu_arch(),
            cpu_arch_abi=self.cpu_arch_abi(),
            cpu_core_count=self.cpu_core_count(),
            total_ram_megabytes=self.total_ram_megabytes(),
        )


def default_device_info() -> DeviceInfo:
    from devinfo.adapters.platform_std import StdPlatformInfoProvider
    from devinfo.runtime.system import get_default_reader

    return DeviceInfo(StdPlatformInfoProvider(), get_default_reader())
