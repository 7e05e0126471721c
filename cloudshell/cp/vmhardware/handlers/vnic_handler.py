from __future__ import annotations

from pyVmomi import vim

from cloudshell.cp.vmhardware.handlers.virtual_device_handler import (
    VirtualDeviceHandler,
)
from cloudshell.cp.vmhardware.models.hardware import AdapterType

# subclasses go before their parents
ADAPTER_TYPES = (
    (vim.vm.device.VirtualVmxnet3Vrdma, AdapterType.VMXNET3_VRDMA),
    (vim.vm.device.VirtualVmxnet3, AdapterType.VMXNET3),
    (vim.vm.device.VirtualVmxnet2, AdapterType.VMXNET2),
    (vim.vm.device.VirtualVmxnet, AdapterType.VMXNET),
    (vim.vm.device.VirtualE1000e, AdapterType.E1000E),
    (vim.vm.device.VirtualE1000, AdapterType.E1000),
    (vim.vm.device.VirtualPCNet32, AdapterType.PCNET32),
    (vim.vm.device.VirtualSriovEthernetCard, AdapterType.SRIOV),
)


class VnicHandler(VirtualDeviceHandler):
    _device: vim.vm.device.VirtualEthernetCard

    def __str__(self) -> str:
        return f"vNIC '{self.label}' (key {self.key})"

    @property
    def mac_address(self) -> str | None:
        try:
            mac = self._device.macAddress
        except AttributeError:
            mac = None
        return mac

    @property
    def adapter_type(self) -> AdapterType:
        for vc_type, adapter_type in ADAPTER_TYPES:
            if isinstance(self._device, vc_type):
                return adapter_type
        return AdapterType.UNKNOWN

    @property
    def network_moid(self) -> str:
        try:
            return self._device.backing.network._moId
        except AttributeError:
            raise ValueError

    @property
    def port_group_key(self) -> str:
        try:
            return self._device.backing.port.portgroupKey
        except AttributeError:
            raise ValueError

    @property
    def opaque_network_id(self) -> str:
        try:
            return self._device.backing.opaqueNetworkId
        except AttributeError:
            raise ValueError

    @property
    def network_id(self) -> str | None:
        """Logical network the vNIC is connected to.

        Standard port group -> network MoID, distributed port group -> port
        group key, NSX opaque network -> opaque network ID.
        """
        backing = self._device.backing
        try:
            if isinstance(backing, vim.vm.device.VirtualEthernetCard.NetworkBackingInfo):
                return self.network_moid
            if isinstance(
                backing,
                vim.vm.device.VirtualEthernetCard.DistributedVirtualPortBackingInfo,
            ):
                return self.port_group_key
            if isinstance(
                backing, vim.vm.device.VirtualEthernetCard.OpaqueNetworkBackingInfo
            ):
                return self.opaque_network_id
        except ValueError:
            pass
        return None
