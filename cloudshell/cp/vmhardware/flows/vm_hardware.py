from __future__ import annotations

from typing import TYPE_CHECKING

from cloudshell.cp.vmhardware.actions.controller_classifier import classify
from cloudshell.cp.vmhardware.actions.disk_reader import read_disks
from cloudshell.cp.vmhardware.actions.validation import validate_scan_depth
from cloudshell.cp.vmhardware.actions.vnic_reader import read_network_adapters
from cloudshell.cp.vmhardware.exceptions import InvalidAttributeException
from cloudshell.cp.vmhardware.handlers.dc_handler import DcHandler
from cloudshell.cp.vmhardware.handlers.device_index import DeviceIndex
from cloudshell.cp.vmhardware.models.hardware import VmHardwareDetails

if TYPE_CHECKING:
    from logging import Logger

    from cloudshell.cp.vmhardware.api_client import VCenterAPIClient
    from cloudshell.cp.vmhardware.resource_config import VmHardwareResourceConfig


def get_vm_hardware(
    vcenter_client: VCenterAPIClient,
    resource_conf: VmHardwareResourceConfig,
    vm_path: str,
    logger: Logger,
    datacenter_id: str | None = None,
    scan_count: int | None = None,
) -> VmHardwareDetails:
    logger.debug(f"Looking for VM or template by name/path '{vm_path}'")
    if scan_count is None:
        try:
            scan_count = resource_conf.scsi_controller_scan_count
        except ValueError:
            attr_name = resource_conf.ATTR_NAMES.scsi_controller_scan_count
            raise InvalidAttributeException(
                f"{attr_name} should be a non-negative integer"
            )
    validate_scan_depth(scan_count)

    if datacenter_id:
        dc = DcHandler.get_dc_by_moid(datacenter_id, vcenter_client)
    else:
        dc = DcHandler.get_dc(resource_conf.default_datacenter, vcenter_client)
    logger.debug(f"Datacenter for VM/template search: {dc}")

    vm = dc.get_vm_by_path(vm_path, vcenter_client)
    uuid = vm.uuid

    index = DeviceIndex.from_devices(vm.devices, vm_path, logger)
    bus = classify(index, scan_count, logger)
    disks = read_disks(index, scan_count, logger)
    network_interfaces = read_network_adapters(index, logger)

    details = VmHardwareDetails(
        uuid=uuid,
        guest_id=vm.guest_id,
        alternate_guest_name=vm.alternate_guest_name,
        firmware=vm.firmware,
        num_cpus=vm.num_cpu,
        num_cores_per_socket=vm.num_cores_per_socket,
        memory=vm.memory_size,
        scsi_type=bus.bus_type,
        scsi_bus_sharing=bus.bus_sharing,
        disks=disks,
        network_interfaces=network_interfaces,
        network_interface_types=[nic.adapter_type for nic in network_interfaces],
    )
    logger.debug(f"VM search for '{vm_path}' completed successfully (UUID {uuid})")
    return details
