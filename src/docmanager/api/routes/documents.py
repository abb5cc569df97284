"""
Document routes, including upload URL issuance.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from docmanager.application.services import DocumentService
from docmanager.domain import Document, DocumentPatch

from ..deps import drop_nulls, get_document_service

router = APIRouter()


class DocumentCreateRequest(BaseModel):
    id: str = ""
    file_name: str = ""
    storage_key: str = ""
    upload_date: Optional[datetime] = None
    status: str = ""
    owner_id: str = ""
    requires_signature: bool = False
    document_type: str = ""
    group_name: str = ""
    recipient: str = ""

    def to_entity(self) -> Document:
        return Document(**self.model_dump())


class DocumentUpdateRequest(BaseModel):
    file_name: Optional[str] = None
    storage_key: Optional[str] = None
    status: Optional[str] = None
    owner_id: Optional[str] = None
    requires_signature: bool = False  # always applied
    document_type: Optional[str] = None
    group_name: Optional[str] = None
    recipient: Optional[str] = None

    def to_patch(self) -> DocumentPatch:
        supplied = drop_nulls(self.model_dump(exclude_unset=True))
        supplied["requires_signature"] = self.requires_signature
        return DocumentPatch(**supplied)


class DocumentResponse(BaseModel):
    document: Dict[str, Any]


class DocumentListResponse(BaseModel):
    documents: List[Dict[str, Any]]


class UploadURLRequest(BaseModel):
    file_name: str = Field(..., max_length=1024)


class UploadURLResponse(BaseModel):
    upload_url: str
    key: str


@router.post("/documents", response_model=DocumentResponse, status_code=201)
def create_document(req: DocumentCreateRequest, service: DocumentService = Depends(get_document_service)):
    doc = service.create(req.to_entity())
    return DocumentResponse(document=doc.to_dict())


@router.get("/documents", response_model=DocumentListResponse)
def list_documents(service: DocumentService = Depends(get_document_service)):
    return DocumentListResponse(documents=[d.to_dict() for d in service.get_all()])


@router.post("/documents/upload-url", response_model=UploadURLResponse)
async def request_upload_url(req: UploadURLRequest, service: DocumentService = Depends(get_document_service)):
    url, key = service.request_upload_url(req.file_name)
    return UploadURLResponse(upload_url=url, key=key)


@router.get("/documents/{document_id}", response_model=DocumentResponse)
def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    doc = service.get_by_id(document_id)
    if doc is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return DocumentResponse(document=doc.to_dict())


@router.put("/documents/{document_id}", response_model=DocumentResponse)
def update_document(
    document_id: str,
    req: DocumentUpdateRequest,
    service: DocumentService = Depends(get_document_service),
):
    doc = service.update(document_id, req.to_patch())
    return DocumentResponse(document=doc.to_dict())


@router.delete("/documents/{document_id}", status_code=204)
def delete_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    service.delete(document_id)
    return Response(status_code=204)
