import unittest

from mock import Mock, PropertyMock
from pyVmomi import vim
from vm_devices import disk, pci_controller, scsi_controller, vnic

from cloudshell.cp.vmhardware.exceptions import (
    InvalidAttributeException,
    InvalidScanDepth,
    MalformedDevice,
)
from cloudshell.cp.vmhardware.flows import get_vm_hardware
from cloudshell.cp.vmhardware.handlers.vm_handler import VmUuidMissing
from cloudshell.cp.vmhardware.models.hardware import (
    AdapterType,
    BusSharing,
    BusType,
    DiskRecord,
)


class TestGetVmHardware(unittest.TestCase):
    def setUp(self):
        self.logger = Mock()
        self.vc_dc = Mock()
        self.vc_dc.name = "DC1"
        self.vc_vm = Mock()
        self.vc_vm.name = "vm-1"
        config = self.vc_vm.config
        config.uuid = "4201a1c6-7d3e-2c5a-8c59-9a2f5e0f3b7d"
        config.guestId = "ubuntu64Guest"
        config.alternateGuestName = ""
        config.firmware = "efi"
        config.hardware.numCPU = 2
        config.hardware.numCoresPerSocket = 1
        config.hardware.memoryMB = 2048
        config.hardware.device = [
            pci_controller(),
            scsi_controller(1000),
            scsi_controller(1001),
            disk(2000, 1000, 0, 40, thin=True),
            disk(2001, 1000, 1, 10),
            vnic(4000, 2, vim.vm.device.VirtualE1000),
            vnic(4001, 0, vim.vm.device.VirtualVmxnet3),
            vnic(4002, 1, vim.vm.device.VirtualE1000),
        ]
        self.vcenter_client = Mock()
        self.vcenter_client.get_dc.return_value = self.vc_dc
        self.vcenter_client.get_dc_by_moid.return_value = self.vc_dc
        self.vcenter_client.get_vm_by_path.return_value = self.vc_vm
        self.resource_conf = Mock(
            default_datacenter="DC1", scsi_controller_scan_count=2
        )

    def test_get_vm_hardware(self):
        # act
        res = get_vm_hardware(
            self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
        )

        # assert
        self.assertEqual(res.uuid, "4201a1c6-7d3e-2c5a-8c59-9a2f5e0f3b7d")
        self.assertEqual(res.guest_id, "ubuntu64Guest")
        self.assertEqual(res.firmware, "efi")
        self.assertEqual(res.num_cpus, 2)
        self.assertEqual(res.memory, 2048)
        self.assertEqual(res.scsi_type, BusType.LSILOGIC)
        self.assertEqual(res.scsi_bus_sharing, BusSharing.NO_SHARING)
        self.assertEqual(
            res.disks,
            [
                DiskRecord(size=40, eagerly_scrub=False, thin_provisioned=True),
                DiskRecord(size=10, eagerly_scrub=False, thin_provisioned=False),
            ],
        )
        self.assertEqual(
            res.network_interface_types,
            [AdapterType.VMXNET3, AdapterType.E1000, AdapterType.E1000],
        )
        self.assertEqual(
            [nic.network_id for nic in res.network_interfaces],
            ["network-4001", "network-4002", "network-4000"],
        )
        self.vcenter_client.get_dc.assert_called_once_with("DC1")
        self.vcenter_client.get_vm_by_path.assert_called_once_with(
            "templates/ubuntu", self.vc_dc
        )

    def test_mixed_bus_type(self):
        devices = self.vc_vm.config.hardware.device
        devices[2] = scsi_controller(1001, vim.vm.device.ParaVirtualSCSIController)

        res = get_vm_hardware(
            self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
        )

        self.assertEqual(res.scsi_type, BusType.MIXED)
        self.assertEqual(res.scsi_bus_sharing, BusSharing.NO_SHARING)

    def test_datacenter_id_and_scan_count(self):
        res = get_vm_hardware(
            self.vcenter_client,
            self.resource_conf,
            "templates/ubuntu",
            self.logger,
            datacenter_id="datacenter-2",
            scan_count=0,
        )

        self.vcenter_client.get_dc_by_moid.assert_called_once_with("datacenter-2")
        self.vcenter_client.get_dc.assert_not_called()
        self.assertEqual(res.scsi_type, BusType.UNKNOWN)
        self.assertEqual(res.disks, [])
        self.assertEqual(len(res.network_interfaces), 3)

    def test_to_dict(self):
        res = get_vm_hardware(
            self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
        ).to_dict()

        self.assertEqual(res["scsi_type"], "lsilogic")
        self.assertEqual(res["scsi_bus_sharing"], "noSharing")
        self.assertEqual(res["network_interface_types"], ["vmxnet3", "e1000", "e1000"])
        self.assertEqual(res["disks"][0]["size"], 40)
        self.assertEqual(res["network_interfaces"][0]["adapter_type"], "vmxnet3")

    def test_invalid_scan_count(self):
        self.resource_conf.scsi_controller_scan_count = -1

        with self.assertRaises(InvalidScanDepth):
            get_vm_hardware(
                self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
            )
        self.vcenter_client.get_dc.assert_not_called()

    def test_malformed_disk(self):
        self.vc_vm.config.hardware.device.append(disk(2002, 1001, 0, 0))

        with self.assertRaises(MalformedDevice) as ctx:
            get_vm_hardware(
                self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
            )
        self.assertIn("templates/ubuntu", str(ctx.exception))
        self.assertIn("2002", str(ctx.exception))

    def test_vm_without_uuid(self):
        self.vc_vm.config.uuid = ""

        with self.assertRaises(VmUuidMissing):
            get_vm_hardware(
                self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
            )

    def test_non_numeric_scan_count(self):
        type(self.resource_conf).scsi_controller_scan_count = PropertyMock(
            side_effect=ValueError
        )
        self.resource_conf.ATTR_NAMES.scsi_controller_scan_count = (
            "SCSI Controller Scan Count"
        )

        with self.assertRaisesRegex(
            InvalidAttributeException, "SCSI Controller Scan Count"
        ):
            get_vm_hardware(
                self.vcenter_client, self.resource_conf, "templates/ubuntu", self.logger
            )
        self.vcenter_client.get_dc.assert_not_called()
