from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from cloudshell.cp.vmhardware.actions.validation import validate_scan_depth
from cloudshell.cp.vmhardware.exceptions import MalformedDevice
from cloudshell.cp.vmhardware.handlers.device_index import DeviceIndex, ensure_index
from cloudshell.cp.vmhardware.handlers.virtual_disk_handler import VirtualDiskHandler
from cloudshell.cp.vmhardware.models.hardware import ControllerKind, DiskRecord
from cloudshell.cp.vmhardware.utils.units_converter import bytes_to_gib

if TYPE_CHECKING:
    from logging import Logger


def _get_disk_record(
    disk: VirtualDiskHandler, bus_number: int, vm_name: str
) -> DiskRecord:
    if not disk.has_backing:
        raise MalformedDevice(vm_name, disk.key, "disk has no backing")
    capacity = disk.capacity_in_bytes
    if not capacity:
        raise MalformedDevice(vm_name, disk.key, "disk has no recorded capacity")

    return DiskRecord(
        size=bytes_to_gib(capacity),
        eagerly_scrub=disk.eagerly_scrub,
        thin_provisioned=disk.thin_provisioned,
        label=disk.label,
        bus_number=bus_number,
        unit_number=disk.unit_number,
        key=disk.key,
    )


def read_disks(
    devices: DeviceIndex | Iterable,
    scan_depth: int,
    logger: Logger,
    kind: ControllerKind = ControllerKind.SCSI,
    vm_name: str = "",
) -> list[DiskRecord]:
    """Disks of the first scan_depth controllers sorted by bus and unit number.

    Disks on the controllers beyond scan_depth are not returned.
    """
    validate_scan_depth(scan_depth)
    index = ensure_index(devices, vm_name, logger)
    logger.info(
        f"Getting disks for the VM '{index.vm_name}' across {scan_depth} "
        f"{kind.value} controller(s) ..."
    )

    disks = []
    for bus_number, controller in index.get_controller_slots(kind, scan_depth):
        for device in index.get_attached_devices(controller.key):
            if isinstance(device, VirtualDiskHandler):
                disks.append(_get_disk_record(device, bus_number, index.vm_name))

    for controller in index.get_controllers(kind)[scan_depth:]:
        skipped = [
            device
            for device in index.get_attached_devices(controller.key)
            if isinstance(device, VirtualDiskHandler)
        ]
        if skipped:
            logger.debug(
                f"{len(skipped)} disk(s) on the {controller} are out of the scan "
                f"depth {scan_depth}, skipping"
            )
    return disks
