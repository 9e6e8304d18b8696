"""Persistence ports: key/value text storage behind every collection.

A port knows nothing about entities. It reads and writes whole serialized
payloads by key, so two ports over the same backing location behave like two
independent sessions: whichever writes last wins.
"""

import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from estate_market.exceptions import ParseError, StorageError


@runtime_checkable
class PersistencePort(Protocol):
    """Read/write serialized payloads by key."""

    def read(self, key: str) -> str | None:
        """Return the payload under ``key``, or ``None`` if absent.

        Raises ``ParseError`` when the stored bytes are not text.
        """
        ...

    def write(self, key: str, text: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...

    def locate(self, key: str) -> str:
        """Return a reference (URL) for the payload stored under ``key``."""
        ...


class InMemoryPort:
    """Port backed by a plain dict. Used by tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, text: str) -> None:
        self._data[key] = text
        self.writes += 1

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def locate(self, key: str) -> str:
        return f"memory://{key}"

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFilePort:
    """Port that keeps one file per key under a directory."""

    def __init__(self, data_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file port.

        Parameters
        ----------
        data_dir : str | Path
            Directory holding one file per collection key.
        pretty : bool
            Informational flag for codecs that want indented JSON.
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty

    def _path(self, key: str) -> Path:
        relative = Path(key)
        if relative.is_absolute() or ".." in relative.parts:
            raise StorageError(f"Invalid storage key {key!r}")
        if not relative.suffix:
            relative = relative.with_suffix(".json")
        return self.data_dir / relative

    def read(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"{path}: not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def write(self, key: str, text: str) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def locate(self, key: str) -> str:
        return self._path(key).resolve().as_uri()
