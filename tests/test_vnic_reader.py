import itertools
import unittest

from mock import Mock
from pyVmomi import vim
from vm_devices import pci_controller, scsi_controller, vnic

from cloudshell.cp.vmhardware.actions.vnic_reader import (
    read_network_adapter_types,
    read_network_adapters,
)
from cloudshell.cp.vmhardware.models.hardware import AdapterType


class TestReadNetworkAdapters(unittest.TestCase):
    def setUp(self):
        self.logger = Mock()
        self.devices = [
            pci_controller(),
            scsi_controller(1000),
            vnic(4000, 2, vim.vm.device.VirtualE1000),
            vnic(4001, 0, vim.vm.device.VirtualVmxnet3),
            vnic(4002, 1, vim.vm.device.VirtualE1000),
        ]

    def test_types_sorted_by_unit_number(self):
        res = read_network_adapter_types(self.devices, self.logger)

        self.assertEqual(
            res, [AdapterType.VMXNET3, AdapterType.E1000, AdapterType.E1000]
        )

    def test_records_sorted_by_unit_number(self):
        res = read_network_adapters(self.devices, self.logger)

        self.assertEqual([r.unit_number for r in res], [0, 1, 2])
        self.assertEqual(
            [r.network_id for r in res], ["network-4001", "network-4002", "network-4000"]
        )
        self.assertEqual(res[0].mac_address, "00:50:56:00:00:00")
        self.assertEqual(res[2].mac_address, "00:50:56:00:00:02")

    def test_output_does_not_depend_on_input_order(self):
        for devices in itertools.permutations(self.devices):
            res = read_network_adapters(list(devices), self.logger)
            self.assertEqual([r.key for r in res], [4001, 4002, 4000])

    def test_unknown_adapter_type(self):
        unknown = vnic(4003, 3, vim.vm.device.VirtualEthernetCard)

        res = read_network_adapters(self.devices + [unknown], self.logger)

        self.assertEqual(len(res), 4)
        self.assertEqual(res[-1].adapter_type, AdapterType.UNKNOWN)
        self.assertEqual(res[-1].network_id, "network-4003")
        self.assertEqual(
            [r.adapter_type for r in res[:3]],
            [AdapterType.VMXNET3, AdapterType.E1000, AdapterType.E1000],
        )
        self.logger.warning.assert_called_once()

    def test_adapter_subclasses(self):
        devices = [
            vnic(4000, 0, vim.vm.device.VirtualVmxnet3Vrdma),
            vnic(4001, 1, vim.vm.device.VirtualVmxnet2),
            vnic(4002, 2, vim.vm.device.VirtualE1000e),
            vnic(4003, 3, vim.vm.device.VirtualPCNet32),
            vnic(4004, 4, vim.vm.device.VirtualSriovEthernetCard),
            vnic(4005, 5, vim.vm.device.VirtualVmxnet),
        ]

        res = read_network_adapter_types(devices, self.logger)

        self.assertEqual(
            res,
            [
                AdapterType.VMXNET3_VRDMA,
                AdapterType.VMXNET2,
                AdapterType.E1000E,
                AdapterType.PCNET32,
                AdapterType.SRIOV,
                AdapterType.VMXNET,
            ],
        )

    def test_scan_depth_does_not_bound_adapters(self):
        res = read_network_adapters(self.devices, self.logger)

        self.assertEqual(len(res), 3)

    def test_distributed_port_group_backing(self):
        backing = vim.vm.device.VirtualEthernetCard.DistributedVirtualPortBackingInfo(
            port=vim.dvs.PortConnection(
                portgroupKey="dvportgroup-21", switchUuid="50 2a 3b 4c"
            )
        )

        res = read_network_adapters([vnic(4000, 0, backing=backing)], self.logger)

        self.assertEqual(res[0].network_id, "dvportgroup-21")

    def test_opaque_network_backing(self):
        backing = vim.vm.device.VirtualEthernetCard.OpaqueNetworkBackingInfo(
            opaqueNetworkId="ls-1234", opaqueNetworkType="nsx.LogicalSwitch"
        )

        res = read_network_adapters([vnic(4000, 0, backing=backing)], self.logger)

        self.assertEqual(res[0].network_id, "ls-1234")

    def test_unsupported_backing(self):
        backing = vim.vm.device.VirtualEthernetCard.LegacyNetworkBackingInfo(
            deviceName="eth0"
        )

        res = read_network_adapters([vnic(4000, 0, backing=backing)], self.logger)

        self.assertIsNone(res[0].network_id)
        self.assertEqual(res[0].adapter_type, AdapterType.VMXNET3)
        self.logger.warning.assert_called_once()

    def test_no_adapters(self):
        self.assertEqual(read_network_adapters([pci_controller()], self.logger), [])
