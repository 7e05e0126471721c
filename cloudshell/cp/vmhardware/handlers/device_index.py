from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from typing import TYPE_CHECKING

import attr

from cloudshell.cp.vmhardware.handlers.controller_handler import ControllerHandler
from cloudshell.cp.vmhardware.handlers.virtual_device_handler import (
    VirtualDeviceHandler,
    is_virtual_controller,
    is_virtual_disk,
    is_vnic,
)
from cloudshell.cp.vmhardware.handlers.virtual_disk_handler import VirtualDiskHandler
from cloudshell.cp.vmhardware.handlers.vnic_handler import VnicHandler
from cloudshell.cp.vmhardware.models.hardware import ControllerKind

if TYPE_CHECKING:
    from logging import Logger


def _wrap(device) -> VirtualDeviceHandler:
    if is_virtual_controller(device):
        return ControllerHandler(device)
    if is_virtual_disk(device):
        return VirtualDiskHandler(device)
    if is_vnic(device):
        return VnicHandler(device)
    return VirtualDeviceHandler(device)


@attr.s(auto_attribs=True)
class DeviceIndex:
    """Lookup structures over one VM's device snapshot.

    Devices stay in a flat list, the index only maps keys to positions in it.
    Controllers of a kind are kept ordered by the device key, so the Nth of
    them is bus N whatever order vCenter returned the devices in.
    """

    vm_name: str
    _devices: list[VirtualDeviceHandler]
    _positions: dict[int, int]
    _children: dict[int, list[int]]
    _controllers: dict[ControllerKind, list[int]]

    @classmethod
    def from_devices(
        cls, devices: Iterable, vm_name: str = "", logger: Logger | None = None
    ) -> DeviceIndex:
        handlers = list(map(_wrap, devices))
        positions = {handler.key: pos for pos, handler in enumerate(handlers)}

        children = defaultdict(list)
        controllers = defaultdict(list)
        for pos, handler in enumerate(handlers):
            if isinstance(handler, ControllerHandler):
                kind = handler.kind
                if kind:
                    controllers[kind].append(pos)

            controller_key = handler.controller_key
            if controller_key is None:
                continue
            if controller_key not in positions:
                if logger:
                    logger.debug(
                        f"{handler} on the VM '{vm_name}' references missing "
                        f"controller {controller_key}, skipping it"
                    )
                continue
            children[controller_key].append(pos)

        for positions_list in children.values():
            positions_list.sort(key=lambda p: handlers[p].sort_key)
        for positions_list in controllers.values():
            positions_list.sort(key=lambda p: handlers[p].key)

        return cls(vm_name, handlers, positions, dict(children), dict(controllers))

    def get_device(self, key: int) -> VirtualDeviceHandler | None:
        pos = self._positions.get(key)
        if pos is None:
            return None
        return self._devices[pos]

    def get_attached_devices(self, controller_key: int) -> list[VirtualDeviceHandler]:
        return [self._devices[pos] for pos in self._children.get(controller_key, [])]

    def get_units(self, controller_key: int) -> list[int]:
        return [
            device.unit_number
            for device in self.get_attached_devices(controller_key)
            if device.unit_number is not None
        ]

    def get_controllers(self, kind: ControllerKind) -> list[ControllerHandler]:
        return [self._devices[pos] for pos in self._controllers.get(kind, [])]

    def get_controller_slots(
        self, kind: ControllerKind, scan_depth: int
    ) -> list[tuple[int, ControllerHandler]]:
        """(bus number, controller) for the first scan_depth controllers."""
        return list(enumerate(self.get_controllers(kind)[:scan_depth]))

    @property
    def vnics(self) -> list[VnicHandler]:
        return [device for device in self._devices if isinstance(device, VnicHandler)]

    @property
    def disks(self) -> list[VirtualDiskHandler]:
        return [
            device for device in self._devices if isinstance(device, VirtualDiskHandler)
        ]


def ensure_index(
    devices: DeviceIndex | Iterable, vm_name: str = "", logger: Logger | None = None
) -> DeviceIndex:
    if isinstance(devices, DeviceIndex):
        return devices
    return DeviceIndex.from_devices(devices, vm_name, logger)
