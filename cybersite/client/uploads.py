"""Client-side media upload flow.

Files are checked against the allow-list and size ceiling before anything is
sent, then uploaded one at a time. Each item moves pending -> uploading ->
success | error and reports progress through an optional callback.
"""

import io
import mimetypes
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import httpx
import structlog

from cybersite.client.site_client import ApiError, SiteApiClient

logger = structlog.get_logger(__name__)

ALLOWED_MIME_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/svg+xml",
        "video/mp4",
    }
)
MAX_FILE_SIZE = 10 * 1024 * 1024

PENDING = "pending"
UPLOADING = "uploading"
SUCCESS = "success"
ERROR = "error"


@dataclass
class UploadItem:
    filename: str
    content: bytes
    content_type: str
    alt: Optional[str] = None
    caption: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    status: str = PENDING
    progress: int = 0
    error: Optional[str] = None
    result: Optional[dict] = None

    @property
    def size(self) -> int:
        return len(self.content)


ProgressCallback = Callable[[UploadItem], None]


def guess_content_type(filename: str) -> str:
    return mimetypes.guess_type(filename)[0] or "application/octet-stream"


def validate_file(filename: str, size: int, content_type: str, max_size: int = MAX_FILE_SIZE) -> Optional[str]:
    """Return why a file is rejected, or None when it may be uploaded."""
    if content_type not in ALLOWED_MIME_TYPES:
        return f"{filename}: file type {content_type} is not supported"
    if size > max_size:
        return f"{filename}: file is larger than {max_size // (1024 * 1024)} MB"
    return None


def validate_files(items: List[UploadItem], max_size: int = MAX_FILE_SIZE) -> Tuple[List[UploadItem], List[str]]:
    accepted, rejected = [], []
    for item in items:
        reason = validate_file(item.filename, item.size, item.content_type, max_size)
        if reason:
            rejected.append(reason)
        else:
            accepted.append(item)
    return accepted, rejected


class ProgressReader(io.BytesIO):
    """Bytes buffer that reports how much of itself has been read."""

    def __init__(self, content: bytes, on_read: Callable[[int], None]):
        super().__init__(content)
        self._total = len(content) or 1
        self._on_read = on_read

    def read(self, size: int = -1) -> bytes:
        chunk = super().read(size)
        self._on_read(min(99, int(self.tell() * 100 / self._total)))
        return chunk


class UploadQueue:
    def __init__(self, client: SiteApiClient, on_progress: Optional[ProgressCallback] = None):
        self.client = client
        self.on_progress = on_progress
        self.items: List[UploadItem] = []
        self.rejected: List[str] = []

    def add(self, items: List[UploadItem]) -> List[UploadItem]:
        """Queue the acceptable files; rejections are kept in `self.rejected`."""
        accepted, rejected = validate_files(items)
        self.items.extend(accepted)
        self.rejected.extend(rejected)
        for reason in rejected:
            logger.warning("Upload rejected", reason=reason)
        return accepted

    def _notify(self, item: UploadItem) -> None:
        if self.on_progress:
            self.on_progress(item)

    def _set_progress(self, item: UploadItem, percent: int) -> None:
        if percent > item.progress:
            item.progress = percent
            self._notify(item)

    def upload(self, item: UploadItem) -> UploadItem:
        item.status, item.progress, item.error = UPLOADING, 0, None
        self._notify(item)

        reader = ProgressReader(item.content, lambda percent: self._set_progress(item, percent))
        try:
            item.result = self.client.upload_media(
                item.filename,
                reader,
                item.content_type,
                alt=item.alt,
                caption=item.caption,
                tags=item.tags or None,
            )
        except (ApiError, httpx.HTTPError) as exc:
            # Transport failures fail the item, not the queue
            item.status, item.progress, item.error = ERROR, 0, str(exc) or exc.__class__.__name__
            logger.warning(
                "Upload failed",
                filename=item.filename,
                status_code=getattr(exc, "status_code", None),
                error=str(exc),
            )
        else:
            item.status, item.progress = SUCCESS, 100
        self._notify(item)
        return item

    def run(self) -> List[UploadItem]:
        """Upload every pending item in order."""
        for item in self.items:
            if item.status == PENDING:
                self.upload(item)
        return self.items

    def retry_failed(self) -> List[UploadItem]:
        for item in self.items:
            if item.status == ERROR:
                self.upload(item)
        return self.items
