from __future__ import annotations

from typing import TYPE_CHECKING

import attr

from cloudshell.cp.vmhardware.exceptions import (
    InvalidAttributeException,
    InvalidScanDepth,
)

if TYPE_CHECKING:
    from logging import Logger

    from cloudshell.cp.vmhardware.resource_config import VmHardwareResourceConfig


def validate_scan_depth(scan_depth) -> int:
    if isinstance(scan_depth, bool) or not isinstance(scan_depth, int):
        raise InvalidScanDepth(scan_depth)
    if scan_depth < 0:
        raise InvalidScanDepth(scan_depth)
    return scan_depth


@attr.s(auto_attribs=True)
class ValidationActions:
    _resource_conf: VmHardwareResourceConfig
    _logger: Logger

    def validate_resource_conf(self):
        self._logger.info("Validating resource config")
        conf = self._resource_conf
        _is_not_empty(conf.address, "address")
        _is_not_empty(conf.user, conf.ATTR_NAMES.user)
        _is_not_empty(conf.password, conf.ATTR_NAMES.password)
        _is_not_empty(conf.default_datacenter, conf.ATTR_NAMES.default_datacenter)
        try:
            scan_count = conf.scsi_controller_scan_count
        except ValueError:
            scan_count = None
        _is_non_negative_int(scan_count, conf.ATTR_NAMES.scsi_controller_scan_count)


def _is_not_empty(value: str, attr_name: str):
    if not value:
        raise InvalidAttributeException(f"{attr_name} cannot be empty")


def _is_non_negative_int(value, attr_name: str):
    try:
        validate_scan_depth(value)
    except InvalidScanDepth:
        raise InvalidAttributeException(
            f"{attr_name} should be a non-negative integer, got {value!r}"
        )
