"""Bounded reads of multipart uploads."""

from typing import Protocol

from ....core.exceptions import FileTooLargeError

CHUNK_SIZE = 1024 * 1024


class ReadableUpload(Protocol):
    """Subset of Starlette's UploadFile used by the upload use cases"""
    filename: str | None
    content_type: str | None

    async def read(self, size: int = -1) -> bytes: ...


async def read_within_limit(upload: ReadableUpload, max_bytes: int) -> bytes:
    """
    Read the whole upload, stopping as soon as it exceeds max_bytes.

    Raises:
        FileTooLargeError: If the upload is larger than max_bytes
    """
    buffer = bytearray()
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise FileTooLargeError(upload.filename or "upload", max_bytes)
    return bytes(buffer)
