class ServeError(RuntimeError):
    """
    Представляет ошибку цикла обслуживания соединений после привязки сокета.
    """
