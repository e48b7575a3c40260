class InvalidAddressError(ValueError):
    """
    Представляет ошибку конфигурации, когда хост и порт не приводятся к адресу сокета.
    """
    def __init__(self, host: str, port: int, reason: str = "not a valid socket address"):
        super().__init__(f"Invalid address {host!r}:{port}: {reason}")
        self.host: str = host
        self.port: int = port
        self.reason: str = reason
