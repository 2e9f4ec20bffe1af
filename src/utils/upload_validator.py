"""Upload validation and on-disk storage for media images.

The validator checks the declared MIME type and the byte size of an incoming
file before anything touches the disk. ``MediaStorage`` writes accepted
files under a generated, collision-resistant name.
"""

import logging
import re
import secrets
import time
from pathlib import Path
from typing import Iterable, Optional

from config import ALLOWED_IMAGE_MIME_TYPES, MAX_FILE_SIZE, UPLOAD_DIR, UPLOAD_URL_PREFIX
from core.exceptions import FileTooLargeError, FileTypeError, ValidationError

logger = logging.getLogger(__name__)


def _format_megabytes(size: int) -> str:
    return f"{size / (1024 * 1024):g}MB"


class UploadValidator:
    """Checks an incoming file's declared type and size."""

    def __init__(
        self,
        max_size: int = MAX_FILE_SIZE,
        allowed_mime_types: Iterable[str] = ALLOWED_IMAGE_MIME_TYPES,
    ):
        self.max_size = max_size
        self.allowed_mime_types = frozenset(t.lower() for t in allowed_mime_types)

    def validate(self, content_type: Optional[str], size: int) -> None:
        """Validate a file before it is admitted to storage.

        Args:
            content_type: MIME type declared by the client.
            size: Length of the file in bytes.

        Raises:
            FileTypeError: If the MIME type is not an allowed image type.
            FileTooLargeError: If the size reaches ``max_size``.
        """
        mime_type = (content_type or "").split(";", 1)[0].strip().lower()
        if mime_type not in self.allowed_mime_types:
            raise FileTypeError()
        # The ceiling itself is already too large
        if size >= self.max_size:
            raise FileTooLargeError(
                f"File size must be less than {_format_megabytes(self.max_size)}"
            )


class MediaStorage:
    """Stores uploaded files in a single directory served under ``url_prefix``."""

    def __init__(self, upload_dir: Path = UPLOAD_DIR, url_prefix: str = UPLOAD_URL_PREFIX):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")

    @staticmethod
    def generate_filename(original_name: str) -> str:
        """Build ``<stem>-<epoch ms>-<random><.ext>`` from a client file name.

        Directory components are dropped and unsafe characters replaced, so
        the result can never point outside the upload directory.
        """
        base = Path((original_name or "").replace("\\", "/")).name
        stem, dot, ext = base.rpartition(".")
        if not dot:
            stem, ext = base, ""
        stem = re.sub(r"[^\w\-]", "_", stem, flags=re.ASCII).strip("_") or "image"
        ext = re.sub(r"[^a-z0-9]", "", ext.lower())
        suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
        return f"{stem[:100]}-{suffix}" + (f".{ext[:10]}" if ext else "")

    def path_for(self, filename: str) -> Path:
        root = self.upload_dir.resolve()
        path = (root / filename).resolve()
        if path.parent != root:
            raise ValidationError("Invalid file name")
        return path

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def save(self, content: bytes, original_name: str) -> str:
        """Write bytes under a fresh generated name and return that name."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        filename = self.generate_filename(original_name)
        path = self.path_for(filename)
        # "xb" refuses to overwrite an existing file
        with open(path, "xb") as f:
            f.write(content)
        logger.info("Stored upload %s (%d bytes)", filename, len(content))
        return filename

    def remove(self, filename: str) -> bool:
        """Delete a stored file.

        Returns:
            True if a file was removed, False if it was already absent.

        Raises:
            OSError: If the file exists but cannot be removed.
        """
        path = self.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.warning("Stored file already absent: %s", filename)
            return False
        logger.info("Removed stored file %s", filename)
        return True
