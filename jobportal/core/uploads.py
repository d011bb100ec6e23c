"""Upload pipeline: check an incoming file, then store it on disk.

``check_upload`` never touches the disk or the database, so callers can reject
a request before anything is written. Stored paths, not bytes, go into rows.
"""
import logging
import re
import secrets
import time
from dataclasses import dataclass, field
from pathlib import Path

from jobportal.config import settings
from jobportal.core.errors import PayloadTooLarge, UnsupportedMediaType

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"


@dataclass(frozen=True)
class UploadPolicy:
    field_name: str
    folder: str
    mime_types: frozenset[str]


RESUME_POLICY = UploadPolicy(
    field_name="resume",
    folder="resumes",
    mime_types=frozenset({
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }),
)
PROFILE_PIC_POLICY = UploadPolicy(
    field_name="profile_pic",
    folder="profile_pics",
    mime_types=frozenset({"image/jpeg", "image/png", "image/gif"}),
)
LOGO_POLICY = UploadPolicy(
    field_name="logo",
    folder="logos",
    mime_types=frozenset({"image/jpeg", "image/jpg", "image/png"}),
)


@dataclass(frozen=True)
class Accepted:
    path: str
    mime: str
    size: int
    filename: str
    folder: str
    content: bytes = field(repr=False, default=b"")


@dataclass(frozen=True)
class Rejected:
    reason: str
    status_code: int


def _stored_name(original: str | None) -> str:
    suffix = Path(original or "").suffix.lower()
    suffix = re.sub(r"[^a-z0-9.]", "", suffix)[:10]
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"


def check_upload(upload, policy: UploadPolicy, max_bytes: int | None = None) -> Accepted | Rejected:
    """Validate MIME type and size of an UploadFile-like object."""
    if max_bytes is None:
        max_bytes = settings.max_upload_mb * 1024 * 1024
    mime = (upload.content_type or "").lower()
    if mime not in policy.mime_types:
        return Rejected(
            reason=f"Invalid file type for {policy.field_name}",
            status_code=UnsupportedMediaType.status_code,
        )
    content = upload.file.read(max_bytes + 1)
    if len(content) > max_bytes:
        return Rejected(
            reason=f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)}MB.",
            status_code=PayloadTooLarge.status_code,
        )
    name = _stored_name(upload.filename)
    return Accepted(
        path=f"{PUBLIC_PREFIX}/{policy.folder}/{name}",
        mime=mime,
        size=len(content),
        filename=name,
        folder=policy.folder,
        content=content,
    )


def require_accepted(result: Accepted | Rejected) -> Accepted:
    if isinstance(result, Rejected):
        if result.status_code == PayloadTooLarge.status_code:
            raise PayloadTooLarge(result.reason)
        raise UnsupportedMediaType(result.reason)
    return result


def store(accepted: Accepted, upload_dir: str | None = None) -> Path:
    base = Path(upload_dir or settings.upload_dir)
    folder = base / accepted.folder
    folder.mkdir(parents=True, exist_ok=True)
    target = folder / accepted.filename
    target.write_bytes(accepted.content)
    logger.info("Stored upload %s (%d bytes)", accepted.path, accepted.size)
    return target
