from .vm_hardware import get_vm_hardware

__all__ = ("get_vm_hardware",)
