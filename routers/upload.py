from typing import List
import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from core.context import ViewerContext
from core.exceptions import UploadError, ValidationError
from core.i18n import translate
from core.response import success_response
from database.object_store import BUCKETS, LocalObjectStore, get_object_store
from routers.auth import get_viewer_context
from schemas.property import MAX_IMAGES
from services.upload import upload_batch, upload_image

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_MIME_TYPES = {"image/jpeg", "image/png", "image/webp"}


def validate_content_type(file: UploadFile, ctx: ViewerContext) -> None:
    if file.content_type not in ALLOWED_MIME_TYPES:
        raise UploadError(file.filename or "upload", translate("invalid_image", ctx.locale))


# Plain def endpoints: Pillow decoding and disk writes run in the threadpool
@router.post("/property-images/batch")
def upload_property_images(
    files: List[UploadFile] = File(...),
    existing_count: int = Form(0, ge=0),
    object_store: LocalObjectStore = Depends(get_object_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Upload listing photos one by one, up to the per-listing maximum.

    Each file gets its own outcome; files past the remaining slots are skipped.
    """
    payload = [(file.filename or "upload", file.file.read()) for file in files]

    result = upload_batch(
        object_store, ctx, "property-images", payload,
        existing_count=existing_count, limit=MAX_IMAGES
    )
    return success_response(
        data={
            "urls": result.urls,
            "outcomes": [outcome.model_dump() for outcome in result.outcomes],
            "skipped": result.skipped,
        },
        message=f"{len(result.urls)} of {len(files)} image(s) uploaded"
    )


@router.post("/{bucket}", status_code=status.HTTP_201_CREATED)
def upload_single_image(
    bucket: str,
    file: UploadFile = File(...),
    object_store: LocalObjectStore = Depends(get_object_store),
    ctx: ViewerContext = Depends(get_viewer_context)
):
    """Upload one offer image or provider avatar."""
    if bucket not in BUCKETS:
        raise ValidationError(f"Unknown bucket '{bucket}'", field="bucket")
    validate_content_type(file, ctx)

    data = file.file.read()
    url = upload_image(object_store, ctx, bucket, file.filename or "upload", data)
    return success_response(data={"url": url}, message="Image uploaded")
