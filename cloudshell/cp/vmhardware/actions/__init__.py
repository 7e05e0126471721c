from .controller_classifier import classify
from .disk_reader import read_disks
from .vnic_reader import read_network_adapter_types, read_network_adapters

__all__ = (
    "classify",
    "read_disks",
    "read_network_adapters",
    "read_network_adapter_types",
)
