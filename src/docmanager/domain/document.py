"""
Document domain model.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Union

from .patch import UNSET, Unset, format_timestamp, parse_timestamp


class DocumentStatus:
    """Conventional status values. Any other string is accepted as well."""

    PENDING_UPLOAD = "PENDING_UPLOAD"
    UPLOADED = "UPLOADED"
    PROCESSED = "PROCESSED"


@dataclass
class Document:
    """Metadata record for a file kept in blob storage."""

    id: str = ""
    file_name: str = ""
    storage_key: str = ""  # opaque locator issued by the upload flow
    upload_date: Optional[datetime] = None
    status: str = ""
    owner_id: str = ""  # Employee id, not validated
    requires_signature: bool = False
    document_type: str = ""
    group_name: str = ""
    recipient: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Flat record; ``upload_date`` as ISO-8601 text."""
        return {
            "id": self.id,
            "file_name": self.file_name,
            "storage_key": self.storage_key,
            "upload_date": format_timestamp(self.upload_date),
            "status": self.status,
            "owner_id": self.owner_id,
            "requires_signature": self.requires_signature,
            "document_type": self.document_type,
            "group_name": self.group_name,
            "recipient": self.recipient,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """Build from a flat record. Raises ValueError on a bad ``upload_date``."""
        return cls(
            id=data.get("id") or "",
            file_name=data.get("file_name") or "",
            storage_key=data.get("storage_key") or "",
            upload_date=parse_timestamp(data.get("upload_date")),
            status=data.get("status") or "",
            owner_id=data.get("owner_id") or "",
            requires_signature=bool(data.get("requires_signature", False)),
            document_type=data.get("document_type") or "",
            group_name=data.get("group_name") or "",
            recipient=data.get("recipient") or "",
        )


MaybeStr = Union[str, Unset]


@dataclass
class DocumentPatch:
    """
    Proposed changes for ``DocumentService.update``.

    String fields are applied only when supplied and non-empty.
    ``requires_signature`` is always applied, so leaving it out resets the flag
    to ``False``.
    """

    file_name: MaybeStr = UNSET
    storage_key: MaybeStr = UNSET
    status: MaybeStr = UNSET
    owner_id: MaybeStr = UNSET
    requires_signature: bool = False
    document_type: MaybeStr = UNSET
    group_name: MaybeStr = UNSET
    recipient: MaybeStr = UNSET

    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset()

    @classmethod
    def from_entity(cls, doc: Document) -> "DocumentPatch":
        """Treat every mutable field of ``doc`` as supplied."""
        return cls(**{f.name: getattr(doc, f.name) for f in fields(cls)})
