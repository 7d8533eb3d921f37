class TransportError(Exception):
    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(f"Video feed request failed: {message}")


class DeserializationError(ValueError):
    pass


class StorageError(Exception):
    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(f"Playlist storage failed: {message}")
