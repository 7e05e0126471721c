class BaseVmHardwareException(Exception):
    pass


class LoginException(BaseVmHardwareException):
    """Login Exception."""


class ObjectNotFoundException(BaseVmHardwareException):
    """Object not found."""


class InvalidAttributeException(BaseVmHardwareException):
    """Attribute is not valid."""


class InvalidScanDepth(BaseVmHardwareException):
    def __init__(self, scan_depth):
        self.scan_depth = scan_depth
        super().__init__(
            f"Controller scan depth should be a non-negative integer, "
            f"got {scan_depth!r}"
        )


class MalformedDevice(BaseVmHardwareException):
    def __init__(self, vm_name: str, device_key: int, reason: str):
        self.vm_name = vm_name
        self.device_key = device_key
        self.reason = reason
        super().__init__(
            f"Device with the key {device_key} on the VM '{vm_name}' is malformed: "
            f"{reason}"
        )
