"""
Validate-then-store handling for multipart uploads.

Routes read the uploaded part into an UploadedFile; services open it with
`stored_upload`, which checks it against an UploadPolicy, writes it to a
uniquely named temp file and removes that file on every exit path.
"""

import logging
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from fastapi import UploadFile
from pydantic import BaseModel

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

MB = 1024 * 1024


class UploadValidationError(ValidationError):
    """Raised when an upload is missing, of the wrong type, or too large."""

    def __init__(self, message: str, code: str = "INVALID_UPLOAD"):
        super().__init__(message, code=code)


class UploadedFile(BaseModel):
    """One multipart file part, read into memory up to its size ceiling."""

    model_config = {"frozen": True}

    filename: str = ""
    content_type: str = ""
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def suffix(self) -> str:
        return Path(self.filename).suffix.lower()


class UploadPolicy(BaseModel):
    """
    What a given endpoint accepts.

    `allowed_types` entries ending in "/" match by prefix ("image/"),
    others must match exactly. `too_large_message` may use {limit_mb}.
    """

    model_config = {"frozen": True}

    allowed_types: tuple[str, ...]
    max_bytes: int
    missing_message: str
    invalid_type_message: str
    too_large_message: str

    def accepts(self, content_type: str) -> bool:
        for allowed in self.allowed_types:
            if allowed.endswith("/"):
                if content_type.startswith(allowed):
                    return True
            elif content_type == allowed:
                return True
        return False

    def with_max_bytes(self, max_bytes: int) -> "UploadPolicy":
        return self.model_copy(update={"max_bytes": max_bytes})

    def validate_file(self, file: Optional[UploadedFile]) -> UploadedFile:
        """
        Check presence, type and size.

        Raises:
            UploadValidationError: With the user-facing message
        """
        if file is None or not file.data:
            raise UploadValidationError(self.missing_message, code="UPLOAD_MISSING")
        if not self.accepts(file.content_type):
            raise UploadValidationError(self.invalid_type_message, code="UPLOAD_INVALID_TYPE")
        if file.size > self.max_bytes:
            raise UploadValidationError(
                self.too_large_message.format(limit_mb=self.max_bytes // MB),
                code="UPLOAD_TOO_LARGE",
            )
        return file


IMAGE_POLICY = UploadPolicy(
    allowed_types=("image/",),
    max_bytes=10 * MB,
    missing_message="No image uploaded",
    invalid_type_message="Please upload a valid image file",
    too_large_message="File size should be less than {limit_mb}MB",
)

RESUME_POLICY = UploadPolicy(
    allowed_types=("application/pdf",),
    max_bytes=5 * MB,
    missing_message="Please upload a valid PDF file",
    invalid_type_message="Please upload a valid PDF file",
    too_large_message="Resume file size should be less than {limit_mb} MB",
)


@contextmanager
def stored_upload(
    file: Optional[UploadedFile],
    policy: UploadPolicy,
    upload_dir: Path,
) -> Iterator[Path]:
    """
    Validate an upload and expose it as a temp file for the block's duration.

    Validation runs before anything touches the disk. The file is deleted
    when the block exits, whether it returns or raises.

    Usage:
        with stored_upload(file, IMAGE_POLICY, settings.upload_dir) as path:
            image = await store.upload_file(path)
    """
    file = policy.validate_file(file)

    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / f"{uuid.uuid4().hex}{file.suffix}"
    path.write_bytes(file.data)

    try:
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to clean up uploaded file {path}: {e}")


async def read_upload(
    upload: Optional[UploadFile],
    max_bytes: int,
) -> Optional[UploadedFile]:
    """
    Read a multipart part into memory; None when the part is absent.

    At most `max_bytes + 1` bytes are buffered, so an oversize part keeps
    just enough data for UploadPolicy.validate_file to reject it by size.
    """
    if upload is None:
        return None
    return UploadedFile(
        filename=upload.filename or "",
        content_type=upload.content_type or "",
        data=await upload.read(max_bytes + 1),
    )
