import logging
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def get_image_from_disk(
    image_path: str, images_dir: Path
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read an image below `images_dir`. Paths resolving outside that directory
    are treated as missing.
    """
    root = Path(images_dir).resolve()
    target = (root / image_path).resolve()

    if not target.is_relative_to(root) or target == root:
        logger.warning(f"Rejected image path outside content root: {image_path}")
        return None, None

    try:
        image_data = target.read_bytes()
    except FileNotFoundError:
        logger.warning(f"Image not found: {image_path}")
        return None, None
    except OSError as e:
        logger.error(f"Error reading image {image_path}: {e}")
        return None, None

    return image_data, get_content_type_from_filename(target.name)


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"
