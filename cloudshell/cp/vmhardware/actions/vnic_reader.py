from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from cloudshell.cp.vmhardware.handlers.device_index import DeviceIndex, ensure_index
from cloudshell.cp.vmhardware.handlers.vnic_handler import VnicHandler
from cloudshell.cp.vmhardware.models.hardware import AdapterType, NetworkAdapterRecord

if TYPE_CHECKING:
    from logging import Logger


def _get_sorted_vnics(index: DeviceIndex) -> list[VnicHandler]:
    return sorted(index.vnics, key=lambda vnic: vnic.sort_key)


def read_network_adapters(
    devices: DeviceIndex | Iterable, logger: Logger, vm_name: str = ""
) -> list[NetworkAdapterRecord]:
    index = ensure_index(devices, vm_name, logger)
    logger.info(f"Getting vNICs for the VM '{index.vm_name}' ...")

    records = []
    for vnic in _get_sorted_vnics(index):
        adapter_type = vnic.adapter_type
        if adapter_type is AdapterType.UNKNOWN:
            logger.warning(
                f"{vnic} on the VM '{index.vm_name}' has unsupported type "
                f"{vnic.type_name}"
            )
        network_id = vnic.network_id
        if network_id is None:
            logger.warning(
                f"Unable to find network for the {vnic} on the VM '{index.vm_name}'"
            )
        records.append(
            NetworkAdapterRecord(
                network_id=network_id,
                adapter_type=adapter_type,
                mac_address=vnic.mac_address,
                label=vnic.label,
                unit_number=vnic.unit_number,
                key=vnic.key,
            )
        )
    return records


def read_network_adapter_types(
    devices: DeviceIndex | Iterable, logger: Logger, vm_name: str = ""
) -> list[AdapterType]:
    return [
        record.adapter_type
        for record in read_network_adapters(devices, logger, vm_name)
    ]
