"""Private photo storage for the profile screen.

Design:
- Picked images are copied into Data/Photos under a fresh unique name.
- The returned absolute path is the persistable photo reference.
- Only files inside Data/Photos are ever read back or removed.
"""
import logging
import os
import shutil
import uuid

from core.paths import PHOTOS_DIR

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".bmp", ".gif")

log = logging.getLogger(__name__)


def get_photos_dir():
    """Return private photo directory path (created if missing)."""
    os.makedirs(PHOTOS_DIR, exist_ok=True)
    return str(PHOTOS_DIR)


def is_supported_image(path):
    """Return True if filename has a supported image extension."""
    return bool(path) and path.lower().endswith(IMAGE_EXTENSIONS)


def _is_private(path):
    """Return True if path resolves inside the private photo directory."""
    base = os.path.realpath(get_photos_dir())
    target = os.path.realpath(path)
    return target.startswith(base + os.path.sep)


def copy_image_to_private_storage(source_path):
    """Copy a picked image into private storage. Returns new reference or None."""
    if not source_path or not os.path.isfile(source_path):
        log.warning("Picked image not found: %s", source_path)
        return None
    if not is_supported_image(source_path):
        log.warning("Picked file is not a supported image: %s", source_path)
        return None

    ext = os.path.splitext(source_path)[1].lower()
    dest_path = os.path.join(get_photos_dir(), f"profile_{uuid.uuid4().hex}{ext}")
    try:
        shutil.copy2(source_path, dest_path)
    except OSError:
        log.error("Failed to copy image into private storage", exc_info=True)
        return None
    return os.path.realpath(dest_path)


def get_image_bytes(photo_ref):
    """Read stored image bytes from disk or return None."""
    if not photo_ref or not os.path.isfile(photo_ref):
        return None
    try:
        with open(photo_ref, "rb") as f:
            return f.read()
    except OSError:
        return None


def discard_image(photo_ref):
    """Remove a previously stored photo. Files outside Data/Photos are left alone."""
    if not photo_ref or not _is_private(photo_ref):
        return False
    if not os.path.isfile(photo_ref):
        return False
    try:
        os.remove(photo_ref)
    except OSError:
        log.warning("Could not remove old photo %s", photo_ref, exc_info=True)
        return False
    return True
