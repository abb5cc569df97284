from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from docmanager.application.services import EmployeeService
from docmanager.domain import Employee, EmployeePatch

from ..deps import drop_nulls, get_employee_service

router = APIRouter()


class EmployeeCreateRequest(BaseModel):
    id: str = ""
    name: str = ""
    email: str = ""
    status: str = ""
    link_date: Optional[datetime] = None
    role_id: str = ""

    def to_entity(self) -> Employee:
        return Employee(**self.model_dump())


class EmployeeUpdateRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[str] = None
    role_id: Optional[str] = None  # "" unassigns the role

    def to_patch(self) -> EmployeePatch:
        return EmployeePatch(**drop_nulls(self.model_dump(exclude_unset=True)))


class EmployeeResponse(BaseModel):
    employee: Dict[str, Any]


class EmployeeListResponse(BaseModel):
    employees: List[Dict[str, Any]]


@router.post("/employees", response_model=EmployeeResponse, status_code=201)
def create_employee(req: EmployeeCreateRequest, service: EmployeeService = Depends(get_employee_service)):
    employee = service.create(req.to_entity())
    return EmployeeResponse(employee=employee.to_dict())


@router.get("/employees", response_model=EmployeeListResponse)
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return EmployeeListResponse(employees=[e.to_dict() for e in service.get_all()])


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    employee = service.get_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    return EmployeeResponse(employee=employee.to_dict())


@router.put("/employees/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: str,
    req: EmployeeUpdateRequest,
    service: EmployeeService = Depends(get_employee_service),
):
    employee = service.update(employee_id, req.to_patch())
    return EmployeeResponse(employee=employee.to_dict())


@router.delete("/employees/{employee_id}", status_code=204)
def delete_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    service.delete(employee_id)
    return Response(status_code=204)
