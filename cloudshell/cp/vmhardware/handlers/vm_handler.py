from __future__ import annotations

from pyVmomi import vim

from cloudshell.cp.vmhardware.exceptions import BaseVmHardwareException
from cloudshell.cp.vmhardware.handlers.managed_entity_handler import ManagedEntityHandler


class VmConfigMissing(BaseVmHardwareException):
    def __init__(self, vm: VmHandler):
        self.vm = vm
        super().__init__(f"No configuration returned for the {vm}")


class VmUuidMissing(BaseVmHardwareException):
    def __init__(self, vm: VmHandler):
        self.vm = vm
        super().__init__(f"The {vm} does not have a UUID")


class VmHandler(ManagedEntityHandler):
    _entity: vim.VirtualMachine

    def __str__(self):
        return f"VM '{self.name}'"

    @property
    def _config(self) -> vim.vm.ConfigInfo:
        config = self._entity.config
        if config is None:
            raise VmConfigMissing(self)
        return config

    @property
    def uuid(self) -> str:
        uuid = self._config.uuid
        if not uuid:
            raise VmUuidMissing(self)
        return uuid

    @property
    def guest_id(self) -> str:
        return self._config.guestId

    @property
    def alternate_guest_name(self) -> str:
        return self._config.alternateGuestName

    @property
    def firmware(self) -> str:
        return self._config.firmware

    @property
    def num_cpu(self) -> int:
        return self._config.hardware.numCPU

    @property
    def num_cores_per_socket(self) -> int:
        return self._config.hardware.numCoresPerSocket

    @property
    def memory_size(self) -> int:
        """Memory in MB."""
        return self._config.hardware.memoryMB

    @property
    def devices(self) -> list[vim.vm.device.VirtualDevice]:
        return list(self._config.hardware.device)
