from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from docmanager.application.services import RoleService
from docmanager.domain import Role, RolePatch

from ..deps import drop_nulls, get_role_service

router = APIRouter()


class RoleCreateRequest(BaseModel):
    id: str = ""
    name: str = ""
    description: str = ""


class RoleUpdateRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class RoleResponse(BaseModel):
    role: Dict[str, Any]


class RoleListResponse(BaseModel):
    roles: List[Dict[str, Any]]


@router.post("/roles", response_model=RoleResponse, status_code=201)
def create_role(req: RoleCreateRequest, service: RoleService = Depends(get_role_service)):
    role = service.create(Role(**req.model_dump()))
    return RoleResponse(role=role.to_dict())


@router.get("/roles", response_model=RoleListResponse)
def list_roles(service: RoleService = Depends(get_role_service)):
    return RoleListResponse(roles=[r.to_dict() for r in service.get_all()])


@router.get("/roles/{role_id}", response_model=RoleResponse)
def get_role(role_id: str, service: RoleService = Depends(get_role_service)):
    role = service.get_by_id(role_id)
    if role is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return RoleResponse(role=role.to_dict())


@router.put("/roles/{role_id}", response_model=RoleResponse)
def update_role(role_id: str, req: RoleUpdateRequest, service: RoleService = Depends(get_role_service)):
    patch = RolePatch(**drop_nulls(req.model_dump(exclude_unset=True)))
    role = service.update(role_id, patch)
    return RoleResponse(role=role.to_dict())


@router.delete("/roles/{role_id}", status_code=204)
def delete_role(role_id: str, service: RoleService = Depends(get_role_service)):
    service.delete(role_id)
    return Response(status_code=204)
