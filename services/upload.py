"""
Image uploads into the object store.

Each image is validated and normalized with Pillow, then written under an
owner-scoped path. Batches upload one file at a time; a failed file is
reported in its own outcome and never undoes the files before it.
"""
import io
import logging
import time
import uuid
from typing import List, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from core.config import settings
from core.context import ViewerContext
from core.exceptions import AuthenticationError, UploadError, ValidationError
from core.i18n import translate
from database.object_store import LocalObjectStore
from schemas.directory import UploadBatchResult, UploadOutcome

logger = logging.getLogger(__name__)

AVATAR_BUCKET = "provider-avatars"
AVATAR_SIZE = 400
MAX_DIMENSION = 1600
JPEG_QUALITY = 85


def max_file_size() -> int:
    return settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024


def object_path(user_id: str, extension: str = "jpg", timestamp_ms: Optional[int] = None) -> str:
    """``<user id>/<timestamp>-<random>.<ext>``"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{user_id}/{timestamp_ms}-{uuid.uuid4().hex[:8]}.{extension}"


def normalize_image(data: bytes, filename: str, bucket: str, locale: str = "en") -> bytes:
    """Re-encode an upload as JPEG; avatars are square-cropped."""
    if len(data) > max_file_size():
        raise UploadError(filename, translate("image_too_large", locale))

    try:
        with Image.open(io.BytesIO(data)) as probe:
            probe.verify()
        img = Image.open(io.BytesIO(data))
        img.load()
    except Image.DecompressionBombError as e:
        logger.warning(f"Rejected oversized upload {filename}: {str(e)}")
        raise UploadError(filename, translate("image_too_large", locale))
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"Rejected upload {filename}: {str(e)}")
        raise UploadError(filename, translate("invalid_image", locale))

    if img.mode != "RGB":
        img = img.convert("RGB")

    if bucket == AVATAR_BUCKET:
        size = min(img.size)
        left = (img.width - size) // 2
        top = (img.height - size) // 2
        img = img.crop((left, top, left + size, top + size))
        img = img.resize((AVATAR_SIZE, AVATAR_SIZE), Image.Resampling.LANCZOS)
    else:
        img.thumbnail((MAX_DIMENSION, MAX_DIMENSION), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", quality=JPEG_QUALITY, optimize=True)
    return buffer.getvalue()


def upload_image(
    object_store: LocalObjectStore,
    ctx: ViewerContext,
    bucket: str,
    filename: str,
    data: bytes
) -> str:
    """Upload one image and return its public URL."""
    if not ctx.is_authenticated:
        raise AuthenticationError(translate("sign_in_to_upload", ctx.locale))

    normalized = normalize_image(data, filename, bucket, ctx.locale)
    url = object_store.upload(bucket, object_path(ctx.user_id), normalized)
    logger.info(f"User {ctx.user_id} uploaded {filename} to {bucket}")
    return url


def upload_batch(
    object_store: LocalObjectStore,
    ctx: ViewerContext,
    bucket: str,
    files: List[Tuple[str, bytes]],
    existing_count: int = 0,
    limit: Optional[int] = None
) -> UploadBatchResult:
    """Upload files in order, one outcome per attempted file.

    With a ``limit``, only the remaining slots are filled and the rest are
    counted as skipped; no remaining slot at all is a validation error.
    """
    if not ctx.is_authenticated:
        raise AuthenticationError(translate("sign_in_to_upload", ctx.locale))

    accepted = files
    if limit is not None:
        remaining = limit - existing_count
        if remaining <= 0:
            raise ValidationError(translate("max_photos_reached", ctx.locale), field="images")
        accepted = files[:remaining]

    result = UploadBatchResult(skipped=len(files) - len(accepted))
    for filename, data in accepted:
        try:
            url = upload_image(object_store, ctx, bucket, filename, data)
            result.outcomes.append(UploadOutcome(filename=filename, url=url))
        except UploadError as e:
            logger.warning(f"Upload of {filename} failed: {e.message}")
            result.outcomes.append(UploadOutcome(filename=filename, error=e.message))

    if result.skipped:
        logger.info(f"Skipped {result.skipped} file(s) beyond the limit of {limit}")
    return result
