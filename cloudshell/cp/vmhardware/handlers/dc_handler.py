from __future__ import annotations

from typing import TYPE_CHECKING

from cloudshell.cp.vmhardware.exceptions import (
    BaseVmHardwareException,
    ObjectNotFoundException,
)
from cloudshell.cp.vmhardware.handlers.managed_entity_handler import ManagedEntityHandler
from cloudshell.cp.vmhardware.handlers.vm_handler import VmHandler

if TYPE_CHECKING:
    from cloudshell.cp.vmhardware.api_client import VCenterAPIClient


class DcNotFound(BaseVmHardwareException):
    def __init__(self, name: str | None = None, moid: str | None = None):
        self.name = name
        self.moid = moid

        if not name and not moid:
            raise ValueError("You should specify name or moid")
        if moid:
            msg = f"Datacenter with the ID {moid} not found"
        else:
            msg = f"Datacenter with the name {name} not found"
        super().__init__(msg)


class VmNotFound(BaseVmHardwareException):
    def __init__(self, dc: DcHandler, path: str):
        self.path = path
        msg = f"VM with the name/path {path} in the DC {dc.name} not found"
        super().__init__(msg)


class DcHandler(ManagedEntityHandler):
    def __str__(self):
        return f"DC '{self.name}'"

    @classmethod
    def get_dc(cls, name: str, vcenter_client: VCenterAPIClient) -> DcHandler:
        try:
            dc = vcenter_client.get_dc(name)
        except ObjectNotFoundException:
            raise DcNotFound(name=name)
        return cls(dc)

    @classmethod
    def get_dc_by_moid(cls, moid: str, vcenter_client: VCenterAPIClient) -> DcHandler:
        try:
            dc = vcenter_client.get_dc_by_moid(moid)
        except ObjectNotFoundException:
            raise DcNotFound(moid=moid)
        return cls(dc)

    def get_vm_by_path(self, path: str, vcenter_client: VCenterAPIClient) -> VmHandler:
        """Look up the VM by its path, a bare name is searched in all folders."""
        try:
            vm = vcenter_client.get_vm_by_path(path, self._entity)
        except ObjectNotFoundException:
            if "/" in path:
                raise VmNotFound(self, path)
            try:
                vm = vcenter_client.get_vm_by_name(path, self._entity)
            except ObjectNotFoundException:
                raise VmNotFound(self, path)
        return VmHandler(vm)
