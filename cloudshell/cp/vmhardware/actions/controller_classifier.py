from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from cloudshell.cp.vmhardware.actions.validation import validate_scan_depth
from cloudshell.cp.vmhardware.handlers.device_index import DeviceIndex, ensure_index
from cloudshell.cp.vmhardware.models.hardware import (
    BusClassification,
    BusSharing,
    BusType,
    ControllerKind,
)

if TYPE_CHECKING:
    from logging import Logger


def _reduce(values: set, mixed, unknown):
    if not values:
        return unknown
    if len(values) > 1:
        return mixed
    return values.pop()


def classify(
    devices: DeviceIndex | Iterable,
    scan_depth: int,
    logger: Logger,
    kind: ControllerKind = ControllerKind.SCSI,
    vm_name: str = "",
) -> BusClassification:
    """Common bus type and sharing mode of the first scan_depth controllers.

    Controllers that disagree give MIXED, no controllers at all give UNKNOWN.
    """
    validate_scan_depth(scan_depth)
    index = ensure_index(devices, vm_name, logger)
    logger.info(
        f"Getting {kind.value} bus type for the VM '{index.vm_name}' "
        f"across {scan_depth} controller(s) ..."
    )

    bus_types = set()
    sharing_modes = set()
    for bus_number, controller in index.get_controller_slots(kind, scan_depth):
        logger.debug(
            f"Bus {bus_number}: {controller} is {controller.bus_type.value}, "
            f"sharing {controller.bus_sharing.value}"
        )
        bus_types.add(controller.bus_type)
        sharing_modes.add(controller.bus_sharing)

    return BusClassification(
        bus_type=_reduce(bus_types, BusType.MIXED, BusType.UNKNOWN),
        bus_sharing=_reduce(sharing_modes, BusSharing.MIXED, BusSharing.UNKNOWN),
    )
