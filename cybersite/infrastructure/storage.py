"""Media storage providers.

Uploads go through a ``StorageProvider``. The simulated provider fabricates a
URL without persisting bytes; the local provider writes under ``UPLOAD_DIR``
and the app serves that directory at ``MEDIA_URL_PREFIX``.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

import structlog

from cybersite.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StoredObject:
    filename: str
    path: str
    url: str


class StorageProvider(Protocol):
    def put(self, filename: str, content: bytes, content_type: str) -> StoredObject:
        ...

    def delete(self, path: str) -> None:
        ...


class SimulatedStorageProvider:
    """Records nothing; returns where the object would live."""

    def __init__(self, url_prefix: str = "/uploads"):
        self.url_prefix = url_prefix.rstrip("/")

    def put(self, filename: str, content: bytes, content_type: str) -> StoredObject:
        path = f"uploads/{filename}"
        logger.info("Simulated upload", filename=filename, size=len(content), content_type=content_type)
        return StoredObject(filename=filename, path=path, url=f"{self.url_prefix}/{filename}")

    def delete(self, path: str) -> None:
        logger.info("Simulated delete", path=path)


class LocalStorageProvider:
    def __init__(self, root: str, url_prefix: str = "/uploads"):
        self.root = root
        self.url_prefix = url_prefix.rstrip("/")

    def put(self, filename: str, content: bytes, content_type: str) -> StoredObject:
        os.makedirs(self.root, exist_ok=True)
        path = os.path.join(self.root, filename)
        with open(path, "wb") as fh:
            fh.write(content)
        logger.info("Stored upload", path=path, size=len(content), content_type=content_type)
        return StoredObject(filename=filename, path=path, url=f"{self.url_prefix}/{filename}")

    def delete(self, path: str) -> None:
        # Only remove files that live under our root
        root = os.path.abspath(self.root)
        target = os.path.abspath(path)
        if os.path.commonpath([root, target]) != root:
            logger.warning("Refusing to delete outside upload dir", path=path)
            return
        if os.path.exists(target):
            os.remove(target)


@lru_cache
def get_storage_provider() -> StorageProvider:
    if settings.STORAGE_BACKEND == "local":
        return LocalStorageProvider(settings.UPLOAD_DIR, settings.MEDIA_URL_PREFIX)
    return SimulatedStorageProvider(settings.MEDIA_URL_PREFIX)
