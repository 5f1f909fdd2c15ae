"""Python client for the Cybersite REST API."""

from cybersite.client.site_client import ApiError, QueryCache, SiteApiClient
from cybersite.client.uploads import UploadItem, UploadQueue, validate_file, validate_files

__all__ = [
    "ApiError",
    "QueryCache",
    "SiteApiClient",
    "UploadItem",
    "UploadQueue",
    "validate_file",
    "validate_files",
]
