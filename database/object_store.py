"""
File object store: binary uploads keyed by owner-scoped paths, each
resolvable through a public URL.
"""
import logging
from pathlib import Path

from core.config import settings
from core.exceptions import UploadError

logger = logging.getLogger(__name__)

BUCKETS = ("offer-images", "property-images", "provider-avatars")


class LocalObjectStore:
    """Stores objects on disk under ``<root>/<bucket>/<path>``."""

    def __init__(self, root: str = None, base_url: str = None):
        self.root = Path(root or settings.MEDIA_ROOT)
        self.base_url = (base_url or settings.MEDIA_BASE_URL).rstrip("/")

    def _target(self, bucket: str, path: str) -> Path:
        if bucket not in BUCKETS:
            raise UploadError(path, f"Unknown bucket '{bucket}'")
        bucket_root = (self.root / bucket).resolve()
        target = (bucket_root / path).resolve()
        if bucket_root not in target.parents:
            raise UploadError(path, "Invalid object path")
        return target

    def upload(self, bucket: str, path: str, data: bytes, upsert: bool = False) -> str:
        """Write ``data`` and return its public URL."""
        target = self._target(bucket, path)
        if target.exists() and not upsert:
            raise UploadError(path, "An object already exists at this path")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            logger.error(f"Error writing object {bucket}/{path}: {str(e)}")
            raise UploadError(path, "Storage write failed")
        logger.info(f"Stored object {bucket}/{path} ({len(data)} bytes)")
        return self.public_url(bucket, path)

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}/{bucket}/{path}"


def get_object_store() -> LocalObjectStore:
    return LocalObjectStore()
