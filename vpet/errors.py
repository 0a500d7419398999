class PetError(Exception):
    """Base class for everything vpet raises."""


class ValidationError(PetError, ValueError):
    """A pet name that cannot be used as an identity or record key."""


class StorageError(PetError):
    def __init__(self, name, message):
        super().__init__(message)
        self.name = name


class StorageNotFound(StorageError):
    def __init__(self, name):
        super().__init__(name, f"No save file exists for '{name}'")


class StorageFormatError(StorageError):
    def __init__(self, name, reason):
        super().__init__(name, f"Save file for '{name}' is corrupt: {reason}")
        self.reason = reason


class StorageIOError(StorageError):
    def __init__(self, name, error: OSError):
        super().__init__(name, f"Could not access save file for '{name}': {error}")
        self.error = error
