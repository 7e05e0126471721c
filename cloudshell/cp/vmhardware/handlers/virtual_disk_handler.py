from __future__ import annotations

from pyVmomi import vim

from cloudshell.cp.vmhardware.handlers.virtual_device_handler import (
    VirtualDeviceHandler,
)
from cloudshell.cp.vmhardware.utils.units_converter import kb_to_bytes


class VirtualDiskHandler(VirtualDeviceHandler):
    _device: vim.vm.device.VirtualDisk

    def __str__(self) -> str:
        return f"Disk '{self.label}' (key {self.key})"

    @property
    def has_backing(self) -> bool:
        return self._device.backing is not None

    @property
    def capacity_in_bytes(self) -> int:
        """Recorded capacity, 0 when nothing is recorded.

        Older hosts don't fill capacityInBytes, capacityInKB is used then.
        """
        if self._device.capacityInBytes:
            return self._device.capacityInBytes
        return kb_to_bytes(self._device.capacityInKB or 0)

    @property
    def eagerly_scrub(self) -> bool:
        return bool(getattr(self._device.backing, "eagerlyScrub", False))

    @property
    def thin_provisioned(self) -> bool:
        return bool(getattr(self._device.backing, "thinProvisioned", False))
