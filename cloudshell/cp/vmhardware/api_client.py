from __future__ import annotations

from functools import cached_property
from logging import Logger

from pyVmomi import vim

from cloudshell.cp.vmhardware.exceptions import LoginException, ObjectNotFoundException
from cloudshell.cp.vmhardware.resource_config import VmHardwareResourceConfig
from cloudshell.cp.vmhardware.utils.client_helpers import get_si


class VCenterAPIClient:
    def __init__(
        self, host: str, user: str, password: str, logger: Logger, port: int = 443
    ):
        self._host = host
        self._user = user
        self._password = password
        self._port = port
        self._logger = logger

    @classmethod
    def from_config(
        cls, conf: VmHardwareResourceConfig, logger: Logger
    ) -> VCenterAPIClient:
        return cls(conf.address, conf.user, conf.password, logger)

    def _get_si(self):
        self._logger.info("Initializing vCenter API client SI...")
        try:
            si = get_si(self._host, self._user, self._password, self._port)
        except vim.fault.InvalidLogin:
            self._logger.exception("Unable to login to the vCenter")
            raise LoginException("Can't connect to the vCenter. Invalid user/password")
        return si

    @cached_property
    def _si(self):
        return self._get_si()

    @property
    def root_container(self):
        return self._si.content.rootFolder

    def _get_items_from_view(self, container, vim_type, recursive=False):
        if not isinstance(vim_type, list):
            vim_type = [vim_type]
        view = self._si.content.viewManager.CreateContainerView(
            container, vim_type, recursive
        )
        items = view.view
        view.DestroyView()
        return items

    def get_dc(self, name: str):
        for dc in self._get_items_from_view(self.root_container, vim.Datacenter):
            if dc.name == name:
                return dc
        raise ObjectNotFoundException(f"Datacenter '{name}' not found")

    def get_dc_by_moid(self, moid: str):
        for dc in self._get_items_from_view(
            self.root_container, vim.Datacenter, recursive=True
        ):
            if dc._moId == moid:
                return dc
        raise ObjectNotFoundException(f"Datacenter with the ID '{moid}' not found")

    def get_vm_by_path(self, path: str, dc):
        """VM or template by its path from the DC vm folder."""
        search_index = self._si.content.searchIndex
        entity = search_index.FindByInventoryPath(f"{dc.name}/vm/{path.strip('/')}")
        if not isinstance(entity, vim.VirtualMachine):
            emsg = f"VM '{path}' not found in datacenter '{dc.name}'"
            raise ObjectNotFoundException(emsg)
        return entity

    def get_vm_by_name(self, name: str, dc):
        for vm in self._get_items_from_view(
            dc.vmFolder, vim.VirtualMachine, recursive=True
        ):
            if vm.name == name:
                return vm
        emsg = f"VM '{name}' not found in datacenter '{dc.name}'"
        raise ObjectNotFoundException(emsg)
