"""Blob naming shared by the storage backends."""

import re
import secrets
import time
from pathlib import PurePosixPath

from ...domain.models.asset import AssetRole


def safe_file_name(original_name: str) -> str:
    """Return a filesystem/object-safe version of an uploaded file name."""
    name = PurePosixPath((original_name or "").replace("\\", "/")).name
    name = re.sub(r"[^a-zA-Z0-9._-]", "_", name).lstrip(".")
    return name or "upload"


def build_storage_path(original_name: str, role: AssetRole) -> str:
    """
    Collision-resistant storage path: ``<role prefix>/<epoch ms>-<random>-<name>``.
    """
    unique = f"{int(time.time() * 1000)}-{secrets.token_hex(4)}"
    return f"{role.prefix}/{unique}-{safe_file_name(original_name)}"
