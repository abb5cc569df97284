from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Tuple

from docmanager.application.ports import DocumentRepositoryPort, FileStoragePort
from docmanager.core.request_context import get_request_id
from docmanager.domain import Document, DocumentPatch, DocumentStatus

from .base import EntityService, wrap_store_errors
from .merge import utcnow
from .upload_keys import DEFAULT_UPLOAD_PREFIX, build_upload_key

logger = logging.getLogger(__name__)


class DocumentService(EntityService[Document, DocumentPatch]):
    """
    Document lifecycle plus upload coordination.

    ``request_upload_url`` only hands out an upload slot; the caller creates the
    Document record (with the returned key) once the upload has happened.
    """

    entity_name = "document"
    entity_type = Document
    patch_type = DocumentPatch
    created_at_field = "upload_date"
    default_status = DocumentStatus.PENDING_UPLOAD

    def __init__(
        self,
        repo: DocumentRepositoryPort,
        file_storage: FileStoragePort,
        *,
        clock: Callable[[], datetime] = utcnow,
        request_id_provider: Callable[[], str] = get_request_id,
        upload_prefix: str = DEFAULT_UPLOAD_PREFIX,
    ):
        super().__init__(repo, clock=clock)
        self._file_storage = file_storage
        self._request_id_provider = request_id_provider
        self._upload_prefix = upload_prefix

    def request_upload_url(self, file_name: str) -> Tuple[str, str]:
        """Return ``(url, key)`` for a direct upload of ``file_name``."""
        key = build_upload_key(
            file_name,
            now=self._clock(),
            request_id=self._request_id_provider() or "",
            prefix=self._upload_prefix,
        )
        with wrap_store_errors("failed to generate upload URL", key=key):
            url, issued_key = self._file_storage.generate_presigned_upload_url(key)
        logger.info("Issued upload URL for key %s", issued_key)
        return url, issued_key
