SHELL_NAME = "VMware vCenter Hardware Inventory"

DEFAULT_SCSI_CONTROLLER_SCAN_COUNT = 1
