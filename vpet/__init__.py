__version__ = "0.1.0"

from .errors import (
    PetError,
    StorageError,
    StorageFormatError,
    StorageIOError,
    StorageNotFound,
    ValidationError,
)
from .events import RandomEvent
from .mood import Mood, classify_mood
from .pet import Pet, clamp
from .storage import DeleteOutcome, PetStore

__all__ = [
    "DeleteOutcome",
    "Mood",
    "Pet",
    "PetError",
    "PetStore",
    "RandomEvent",
    "StorageError",
    "StorageFormatError",
    "StorageIOError",
    "StorageNotFound",
    "ValidationError",
    "clamp",
    "classify_mood",
    "__version__",
]
