"""
Cart persistence over a durable key-value slot.

The slot holds a JSON list of {id, title, price, image, qty} objects.
There is no schema version: anything that does not match the layout is
treated as "no cart".
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from shopcart.config import CART_STORAGE_DIR, CART_STORAGE_KEY
from shopcart.errors import MalformedPersistedState, ERROR_PERSISTED_STATE
from shopcart.logging import get_logger
from .models import CartLine

logger = get_logger(__name__)


class SlotStorage(Protocol):
    """Key-value storage of text values."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemorySlotStorage:
    """In-process storage, for tests and throwaway sessions."""

    def __init__(self):
        self._store: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)


class FileSlotStorage:
    """One file per key inside a directory."""

    def __init__(self, directory: Path = CART_STORAGE_DIR):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # Keys are config values, but keep them from escaping the directory
        safe_key = key.replace(os.sep, "_").replace("..", "_")
        return self.directory / f"{safe_key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        # Write then rename so a crash never leaves a half-written slot
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class PersistedLine(BaseModel):
    """Strict schema for one persisted line."""
    model_config = ConfigDict(strict=True, extra="ignore")

    id: int
    title: str
    price: float = Field(ge=0, allow_inf_nan=False)
    image: str
    qty: int = Field(ge=1)


_persisted_adapter = TypeAdapter(list[PersistedLine])


def decode_cart(raw: str) -> list[CartLine]:
    """
    Decode slot content into cart lines.

    Raises:
        MalformedPersistedState: invalid JSON, wrong shape, or duplicate ids
    """
    try:
        data = json.loads(raw)
        records = _persisted_adapter.validate_python(data)
    except (ValueError, ValidationError) as e:
        raise MalformedPersistedState(f"{ERROR_PERSISTED_STATE}: {e.__class__.__name__}") from e

    lines = [CartLine.from_dict(record.model_dump()) for record in records]
    ids = [line.id for line in lines]
    if len(ids) != len(set(ids)):
        raise MalformedPersistedState(f"{ERROR_PERSISTED_STATE}: duplicate ids")
    return lines


def encode_cart(lines: Iterable[CartLine]) -> str:
    return json.dumps([line.to_dict() for line in lines], ensure_ascii=False)


class CartPersistence:
    """Saves and restores the full cart in a single named slot."""

    def __init__(self, storage: SlotStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def save(self, lines: Iterable[CartLine]) -> None:
        """Overwrite the slot with the full line sequence (last writer wins)."""
        self.storage.set(self.key, encode_cart(lines))

    def load(self) -> list[CartLine]:
        """Restore the cart; a missing or malformed slot yields an empty cart."""
        try:
            raw = self.storage.get(self.key)
            if not raw:
                return []
            return decode_cart(raw)
        except (MalformedPersistedState, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring persisted cart in slot '{self.key}': {e}")
            return []
