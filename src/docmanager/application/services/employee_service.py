from __future__ import annotations

from docmanager.domain import DEFAULT_EMPLOYEE_STATUS, Employee, EmployeePatch

from .base import EntityService


class EmployeeService(EntityService[Employee, EmployeePatch]):
    """Employees get ``link_date`` = now and status "Active" when not given.

    ``role_id`` may stay empty on create; it is assigned later through update.
    """

    entity_name = "employee"
    entity_type = Employee
    patch_type = EmployeePatch
    created_at_field = "link_date"
    default_status = DEFAULT_EMPLOYEE_STATUS
