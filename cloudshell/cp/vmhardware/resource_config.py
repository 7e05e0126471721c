from cloudshell.shell.standards.core.resource_config_entities import (
    GenericResourceConfig,
    PasswordAttrRO,
    ResourceAttrRO,
)

from cloudshell.cp.vmhardware.constants import (
    DEFAULT_SCSI_CONTROLLER_SCAN_COUNT,
    SHELL_NAME,
)


class ResourceAttrROShellName(ResourceAttrRO):
    def __init__(self, name, namespace=ResourceAttrRO.NAMESPACE.SHELL_NAME):
        super().__init__(name, namespace)


class ResourceIntAttrRO(ResourceAttrRO):
    def __init__(self, name, namespace, default=0):
        super().__init__(name, namespace, default)

    def __get__(self, instance, owner) -> int:
        val = super().__get__(instance, owner)
        if val is self or val is self.default:
            return val
        return int(val)


class VmHardwareAttributeNames:
    user = "User"
    password = "Password"
    default_datacenter = "Default Datacenter"
    scsi_controller_scan_count = "SCSI Controller Scan Count"


class VmHardwareResourceConfig(GenericResourceConfig):
    ATTR_NAMES = VmHardwareAttributeNames

    user = ResourceAttrROShellName(ATTR_NAMES.user)
    password = PasswordAttrRO(ATTR_NAMES.password, PasswordAttrRO.NAMESPACE.SHELL_NAME)
    default_datacenter = ResourceAttrROShellName(ATTR_NAMES.default_datacenter)
    scsi_controller_scan_count = ResourceIntAttrRO(
        ATTR_NAMES.scsi_controller_scan_count,
        ResourceIntAttrRO.NAMESPACE.SHELL_NAME,
        default=DEFAULT_SCSI_CONTROLLER_SCAN_COUNT,
    )

    @classmethod
    def from_context(cls, context, shell_name=SHELL_NAME, api=None, supported_os=None):
        """Creates an instance of a Resource by given context.

        :param str shell_name: Shell Name
        :param list supported_os: list of supported OS
        :param cloudshell.shell.core.driver_context.ResourceCommandContext context:
        :param cloudshell.api.cloudshell_api.CloudShellAPISession api:
        :rtype: VmHardwareResourceConfig
        """
        return super(VmHardwareResourceConfig, cls).from_context(
            context=context, shell_name=shell_name, api=api, supported_os=supported_os
        )
