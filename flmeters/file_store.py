"""Key/value rendezvous store backed by files in a shared directory."""

from __future__ import annotations

import hashlib
import os
import time

DEFAULT_TIMEOUT = 120.0
_POLL_INTERVAL = 0.01


class FileStoreError(RuntimeError):
    """Raised when a store operation fails or times out."""


def _encode_name(name: str) -> str:
    # A stable digest, so that separate processes agree on file names.
    return hashlib.sha256(name.encode("utf-8")).hexdigest()


class FileStore:
    """Stores binary values under string keys as files in ``path``.

    Each key is written once. Readers block until the key appears or the
    timeout, in seconds, runs out.
    """

    def __init__(self, path: str | os.PathLike[str], timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_path = os.fspath(path)
        self._timeout = timeout

    def get(self, key: str) -> bytes:
        """Return the value stored under ``key``, waiting until it is set."""
        path = self._object_path(key)
        self._wait(key)
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            raise FileStoreError(f"FileStore get: file open failed: {path}") from exc
        if not data:
            raise FileStoreError(f"FileStore get: file is empty: {path}")
        return data

    def set(self, key: str, data: bytes | bytearray | memoryview) -> None:
        """Store ``data`` under ``key``; the key must not exist yet."""
        tmp = self._tmp_path(key)
        path = self._object_path(key)

        if os.path.exists(path):
            raise FileStoreError(f"FileStore set: file already exists: {path}")

        try:
            with open(tmp, "wb") as fh:
                fh.write(bytes(data))
        except OSError as exc:
            raise FileStoreError(f"FileStore set: file create failed: {tmp}") from exc

        try:
            os.replace(tmp, path)
        except OSError as exc:
            raise FileStoreError("FileStore set: rename failed") from exc

    def clear(self, key: str) -> None:
        """Remove ``key`` from the store if it is there."""
        try:
            os.remove(self._object_path(key))
        except OSError:
            pass

    def _check(self, key: str) -> bool:
        path = self._object_path(key)
        try:
            with open(path, "rb"):
                pass
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise FileStoreError(f"FileStore check: file open failed: {path}") from exc
        return True

    def _wait(self, key: str) -> None:
        start = time.monotonic()
        while not self._check(key):
            if time.monotonic() - start > self._timeout:
                raise FileStoreError(f"FileStore timed out for key: {key}")
            time.sleep(_POLL_INTERVAL)

    def _tmp_path(self, name: str) -> str:
        return os.path.join(self._base_path, "." + _encode_name(name))

    def _object_path(self, name: str) -> str:
        return os.path.join(self._base_path, _encode_name(name))