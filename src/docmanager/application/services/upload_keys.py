from __future__ import annotations

from datetime import datetime

DEFAULT_UPLOAD_PREFIX = "uploads/"


def build_upload_key(
    file_name: str,
    *,
    now: datetime,
    request_id: str = "",
    prefix: str = DEFAULT_UPLOAD_PREFIX,
) -> str:
    """
    ``<prefix><file_name>_<unix seconds>_<request id>``.

    The file name is used as given. Two requests for the same name collide only
    when they share both the second and the request id.
    """
    return f"{prefix}{file_name}_{int(now.timestamp())}_{request_id}"
