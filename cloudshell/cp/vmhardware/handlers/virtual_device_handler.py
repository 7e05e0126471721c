from __future__ import annotations

import attr
from pyVmomi import vim


def is_vnic(device) -> bool:
    return isinstance(device, vim.vm.device.VirtualEthernetCard)


def is_virtual_disk(device) -> bool:
    return isinstance(device, vim.vm.device.VirtualDisk)


def is_virtual_controller(device) -> bool:
    return isinstance(device, vim.vm.device.VirtualController)


@attr.s(auto_attribs=True)
class VirtualDeviceHandler:
    _device: vim.vm.device.VirtualDevice

    def __str__(self) -> str:
        return f"Device '{self.label}' (key {self.key})"

    @property
    def key(self) -> int:
        return self._device.key

    @property
    def controller_key(self) -> int | None:
        # pyVmomi leaves optional ints unset as None, 0 is never a device key
        return self._device.controllerKey or None

    @property
    def unit_number(self) -> int | None:
        return self._device.unitNumber

    @property
    def label(self) -> str:
        try:
            return self._device.deviceInfo.label
        except AttributeError:
            return ""

    @property
    def sort_key(self) -> tuple:
        """Ascending unit number, devices without one go last."""
        unit = self.unit_number
        return unit is None, unit or 0, self.key

    @property
    def type_name(self) -> str:
        return type(self._device).__name__
