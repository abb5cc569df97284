from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

UPLOAD_URL_TTL_SECONDS = 5 * 60


@runtime_checkable
class FileStoragePort(Protocol):
    """
    Blob store able to authorize a direct client upload.

    The returned URL accepts a single PUT of the object within the validity
    window. The returned key is the stable locator of the object and does not
    depend on the URL.
    """

    def generate_presigned_upload_url(self, key: str) -> Tuple[str, str]:
        """Return ``(url, key)`` authorizing an upload to ``key``."""
