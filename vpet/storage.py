import json
import logging
import os
from contextlib import suppress
from enum import Enum
from pathlib import Path

from .constants import SAVE_FILE_DIR, SAVE_FILE_SUFFIX
from .errors import StorageFormatError, StorageIOError, StorageNotFound, ValidationError
from .pet import Pet

logger = logging.getLogger(__name__)


class DeleteOutcome(Enum):
    DELETED = "deleted"
    ABSENT = "absent"


class PetStore:
    """One JSON save file per pet, named after the pet, inside ``directory``."""

    def __init__(self, directory=SAVE_FILE_DIR):
        self.directory = Path(directory)

    def path_for(self, name) -> Path:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("A pet needs a non-empty name")
        if "/" in name or "\\" in name or "\x00" in name or name in (".", ".."):
            raise ValidationError(f"'{name}' cannot be used as a save file name")
        return self.directory / f"{name}{SAVE_FILE_SUFFIX}"

    def exists(self, name) -> bool:
        return self.path_for(name).is_file()

    def save(self, pet: Pet) -> Path:
        path = self.path_for(pet.name)
        tmp = path.with_name(path.name + ".tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(pet.to_dict(), f, indent=4, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except OSError as e:
            with suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageIOError(pet.name, e) from e
        logger.info("Saved %s to %s", pet.name, path)
        return path

    def load(self, name) -> Pet:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise StorageNotFound(name) from e
        except OSError as e:
            raise StorageIOError(name, e) from e
        except (ValueError, RecursionError) as e:
            # JSONDecodeError, UnicodeDecodeError and oversized integers
            raise StorageFormatError(name, str(e)) from e
        try:
            pet = Pet.from_dict(data)
        except StorageFormatError as e:
            raise StorageFormatError(name, e.reason) from e
        if pet.name != name:
            raise StorageFormatError(name, f"record belongs to '{pet.name}'")
        logger.info("Loaded %s from %s", pet.name, path)
        return pet

    def delete(self, name) -> DeleteOutcome:
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("No save file to delete for %s", name)
            return DeleteOutcome.ABSENT
        except OSError as e:
            raise StorageIOError(name, e) from e
        logger.info("Deleted save file %s", path)
        return DeleteOutcome.DELETED
