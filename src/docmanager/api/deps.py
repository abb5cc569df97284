from __future__ import annotations

from fastapi import Request

from docmanager.application.services import DocumentService, EmployeeService, RoleService


def get_document_service(request: Request) -> DocumentService:
    return request.app.state.container.resolve(DocumentService)


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.container.resolve(EmployeeService)


def get_role_service(request: Request) -> RoleService:
    return request.app.state.container.resolve(RoleService)


def drop_nulls(data: dict) -> dict:
    """JSON ``null`` counts as "not supplied" for partial updates."""
    return {k: v for k, v in data.items() if v is not None}
