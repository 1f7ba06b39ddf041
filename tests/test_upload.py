import io
from pathlib import Path

import pytest
from PIL import Image

from core.exceptions import AuthenticationError, UploadError, ValidationError
from schemas.property import MAX_IMAGES
from services.upload import object_path, upload_batch, upload_image


def stored_file(tmp_path, url):
    return Path(tmp_path) / url.split("/uploads/", 1)[1]


def image_bytes(size=(64, 48), mode="RGB", fmt="PNG"):
    buffer = io.BytesIO()
    Image.new(mode, size).save(buffer, format=fmt)
    return buffer.getvalue()


def test_object_path_is_owner_scoped():
    path = object_path("user-1", "jpg", timestamp_ms=1700000000000)
    owner, name = path.split("/")
    assert owner == "user-1"
    assert name.startswith("1700000000000-")
    assert name.endswith(".jpg")


def test_upload_normalizes_to_jpeg(object_store, ctx, tmp_path):
    url = upload_image(object_store, ctx, "offer-images", "photo.png", image_bytes(mode="RGBA"))

    assert url.startswith(f"http://testserver/uploads/offer-images/{ctx.user_id}/")
    with Image.open(stored_file(tmp_path, url)) as img:
        assert img.format == "JPEG"
        assert img.mode == "RGB"


def test_avatar_is_square(object_store, ctx, tmp_path):
    url = upload_image(object_store, ctx, "provider-avatars", "me.png", image_bytes(size=(800, 600)))
    with Image.open(stored_file(tmp_path, url)) as img:
        assert img.size == (400, 400)


def test_large_images_are_downscaled(object_store, ctx, tmp_path):
    url = upload_image(object_store, ctx, "property-images", "big.png", image_bytes(size=(3200, 1600)))
    with Image.open(stored_file(tmp_path, url)) as img:
        assert img.size == (1600, 800)


def test_rejects_non_images(object_store, ctx):
    with pytest.raises(UploadError) as exc:
        upload_image(object_store, ctx, "offer-images", "notes.txt", b"hello")
    assert exc.value.message == "Invalid image file."


def test_unknown_bucket(object_store, ctx):
    with pytest.raises(UploadError):
        upload_image(object_store, ctx, "secrets", "a.png", image_bytes())


def test_sign_in_required(object_store, anon_ctx):
    with pytest.raises(AuthenticationError):
        upload_image(object_store, anon_ctx, "offer-images", "a.png", image_bytes())


class TestBatch:

    def test_failures_do_not_undo_earlier_uploads(self, object_store, ctx, tmp_path):
        files = [("one.png", image_bytes()), ("broken.png", b"\x89PNG nope"), ("three.png", image_bytes())]

        result = upload_batch(object_store, ctx, "property-images", files)

        assert [o.ok for o in result.outcomes] == [True, False, True]
        assert result.outcomes[1].error == "Invalid image file."
        assert len(result.urls) == 2
        assert all(stored_file(tmp_path, url).exists() for url in result.urls)

    def test_only_remaining_slots_are_filled(self, object_store, ctx):
        files = [(f"{i}.png", image_bytes()) for i in range(3)]

        result = upload_batch(
            object_store, ctx, "property-images", files,
            existing_count=MAX_IMAGES - 1, limit=MAX_IMAGES
        )

        assert len(result.outcomes) == 1
        assert result.skipped == 2

    def test_no_slots_left(self, object_store, ctx):
        with pytest.raises(ValidationError) as exc:
            upload_batch(
                object_store, ctx, "property-images", [("a.png", image_bytes())],
                existing_count=MAX_IMAGES, limit=MAX_IMAGES
            )
        assert exc.value.message == "You already reached the maximum photos."

    def test_oversized_image_gets_its_own_outcome(self, object_store, ctx, tmp_path, monkeypatch):
        small = image_bytes(size=(10, 10))
        huge = image_bytes(size=(200, 200), mode="1")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

        result = upload_batch(object_store, ctx, "property-images", [("ok.png", small), ("huge.png", huge)])

        assert [o.ok for o in result.outcomes] == [True, False]
        assert result.outcomes[1].error == "Image is too large."
        assert stored_file(tmp_path, result.urls[0]).exists()
