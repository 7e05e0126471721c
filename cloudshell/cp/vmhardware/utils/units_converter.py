BASE_2 = 1024

KiB = BASE_2
GiB = BASE_2**3


def kb_to_bytes(kb: int) -> int:
    return kb * KiB


def bytes_to_gib(size: int) -> int:
    """Whole GiB, the remainder is dropped."""
    return size // GiB
