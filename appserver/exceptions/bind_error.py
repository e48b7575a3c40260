from typing import Optional


class BindError(OSError):
    """
    Представляет отказ операционной системы в привязке слушающего сокета.
    """
    def __init__(self, address: str, errno: Optional[int], strerror: Optional[str]):
        super().__init__(errno, f"Could not bind {address}: {strerror}")
        self.address: str = address
