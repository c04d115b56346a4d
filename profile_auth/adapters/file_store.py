"""
File Session Store - Credential kept in a JSON document on disk.

The document is a flat string-keyed object, so several keys can share one
file the way a browser's local storage does.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union
from profile_auth.ports.session_store_port import SessionStorePort
from profile_auth.exceptions import SessionStoreError

logger = logging.getLogger(__name__)


class FileSessionStore(SessionStorePort):
    """
    JSON-file credential storage.

    Survives process restarts. Writes go through a temporary file and an
    atomic replace; the file is created with 0600 permissions.
    """

    def __init__(self, path: Union[str, Path], key: str = "token"):
        """
        Initialize file store.

        Args:
            path: Location of the JSON document (parent dirs are created)
            key: Key the credential is stored under
        """
        self._path = Path(path).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        """Load the document; missing or corrupt files read as empty."""
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable session file {self._path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring session file {self._path}: not a JSON object")
            return {}
        return data

    def _write(self, data: Dict[str, str]):
        """Atomically replace the document."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get(self) -> Optional[str]:
        value = self._read().get(self._key)
        if isinstance(value, str) and value:
            return value
        return None

    def set(self, credential: str) -> None:
        data = self._read()
        data[self._key] = credential
        try:
            self._write(data)
        except OSError as e:
            logger.warning(f"Could not write session file {self._path}: {e}")
            raise SessionStoreError(f"Could not store session: {e}") from e

    def clear(self) -> None:
        data = self._read()
        if self._key not in data:
            return

        del data[self._key]
        try:
            if data:
                self._write(data)
            else:
                self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not clear session file {self._path}: {e}")
