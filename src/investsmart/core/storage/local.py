"""
Local filesystem persistence provider.

Each key maps to one UTF-8 file ``<base_path>/<key>.json``. Writes go through
a temp file and ``os.replace`` so a crash mid-write never leaves a torn blob.
"""

import os
import tempfile
from pathlib import Path

from loguru import logger

from .base import KeyValueStore, StorageError, StoragePermissionError, validate_key

_SUFFIX = ".json"


class LocalStore(KeyValueStore):
    """Local filesystem provider."""

    def __init__(self, base_path: str = "~/.investsmart-data/store", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = validate_key(key)
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / f"{raw_key}{_SUFFIX}").resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        return full_path

    def get(self, key: str) -> str | None:
        path = self._get_full_path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            logger.warning(f"Stored value for '{key}' is not valid UTF-8: {e}")
            return None
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._get_full_path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot write to {path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)  # atomic on POSIX
        except BaseException as e:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            if isinstance(e, PermissionError):
                raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
            if isinstance(e, OSError):
                raise StorageError(f"Cannot write to {path}: {e}") from e
            raise
        logger.debug(f"Wrote {len(value)} chars to {path}")
