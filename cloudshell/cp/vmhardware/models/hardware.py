from __future__ import annotations

from enum import Enum

import attr


class ControllerKind(Enum):
    SCSI = "scsi"
    SATA = "sata"
    NVME = "nvme"
    IDE = "ide"


class BusType(Enum):
    LSILOGIC = "lsilogic"
    LSILOGIC_SAS = "lsilogic-sas"
    PVSCSI = "pvscsi"
    BUSLOGIC = "buslogic"
    AHCI = "ahci"
    NVME = "nvme"
    IDE = "ide"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class BusSharing(Enum):
    NO_SHARING = "noSharing"
    PHYSICAL = "physicalSharing"
    VIRTUAL = "virtualSharing"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class AdapterType(Enum):
    E1000 = "e1000"
    E1000E = "e1000e"
    PCNET32 = "pcnet32"
    SRIOV = "sriov"
    VMXNET = "vmxnet"
    VMXNET2 = "vmxnet2"
    VMXNET3 = "vmxnet3"
    VMXNET3_VRDMA = "vmxnet3vrdma"
    UNKNOWN = "unknown"


@attr.s(auto_attribs=True, frozen=True)
class BusClassification:
    bus_type: BusType
    bus_sharing: BusSharing


@attr.s(auto_attribs=True, frozen=True)
class DiskRecord:
    size: int
    eagerly_scrub: bool
    thin_provisioned: bool
    label: str = attr.ib(default="", eq=False)
    bus_number: int = attr.ib(default=0, eq=False)
    unit_number: int | None = attr.ib(default=None, eq=False)
    key: int | None = attr.ib(default=None, eq=False)


@attr.s(auto_attribs=True, frozen=True)
class NetworkAdapterRecord:
    network_id: str | None
    adapter_type: AdapterType
    mac_address: str | None
    label: str = attr.ib(default="", eq=False)
    unit_number: int | None = attr.ib(default=None, eq=False)
    key: int | None = attr.ib(default=None, eq=False)


def _serialize(inst, field, value):
    if isinstance(value, Enum):
        return value.value
    return value


@attr.s(auto_attribs=True)
class VmHardwareDetails:
    uuid: str
    guest_id: str
    alternate_guest_name: str
    firmware: str
    num_cpus: int
    num_cores_per_socket: int
    memory: int
    scsi_type: BusType
    scsi_bus_sharing: BusSharing
    disks: list[DiskRecord] = attr.ib(factory=list)
    network_interfaces: list[NetworkAdapterRecord] = attr.ib(factory=list)
    network_interface_types: list[AdapterType] = attr.ib(factory=list)

    def to_dict(self) -> dict:
        return attr.asdict(self, value_serializer=_serialize)
