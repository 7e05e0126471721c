from __future__ import annotations

from pyVmomi import vim

from cloudshell.cp.vmhardware.handlers.virtual_device_handler import (
    VirtualDeviceHandler,
)
from cloudshell.cp.vmhardware.models.hardware import BusSharing, BusType, ControllerKind

# most specific classes go first
CONTROLLER_KINDS = (
    (vim.vm.device.VirtualSCSIController, ControllerKind.SCSI),
    (vim.vm.device.VirtualSATAController, ControllerKind.SATA),
    (vim.vm.device.VirtualNVMEController, ControllerKind.NVME),
    (vim.vm.device.VirtualIDEController, ControllerKind.IDE),
)

BUS_TYPES = (
    (vim.vm.device.VirtualLsiLogicSASController, BusType.LSILOGIC_SAS),
    (vim.vm.device.VirtualLsiLogicController, BusType.LSILOGIC),
    (vim.vm.device.ParaVirtualSCSIController, BusType.PVSCSI),
    (vim.vm.device.VirtualBusLogicController, BusType.BUSLOGIC),
    (vim.vm.device.VirtualAHCIController, BusType.AHCI),
    (vim.vm.device.VirtualNVMEController, BusType.NVME),
    (vim.vm.device.VirtualIDEController, BusType.IDE),
)

SHARING_MODES = {
    "noSharing": BusSharing.NO_SHARING,
    "physicalSharing": BusSharing.PHYSICAL,
    "virtualSharing": BusSharing.VIRTUAL,
}


def get_controller_kind(device) -> ControllerKind | None:
    for vc_type, kind in CONTROLLER_KINDS:
        if isinstance(device, vc_type):
            return kind
    return None


class ControllerHandler(VirtualDeviceHandler):
    _device: vim.vm.device.VirtualController

    def __str__(self) -> str:
        return f"Controller '{self.label}' (key {self.key})"

    @property
    def kind(self) -> ControllerKind | None:
        return get_controller_kind(self._device)

    @property
    def bus_type(self) -> BusType:
        for vc_type, bus_type in BUS_TYPES:
            if isinstance(self._device, vc_type):
                return bus_type
        return BusType.UNKNOWN

    @property
    def bus_sharing(self) -> BusSharing:
        """Only SCSI controllers can share the bus."""
        if self.kind is not ControllerKind.SCSI:
            return BusSharing.NO_SHARING
        shared_bus = getattr(self._device, "sharedBus", None)
        return SHARING_MODES.get(str(shared_bus), BusSharing.UNKNOWN)
