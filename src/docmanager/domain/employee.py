"""
Employee domain model.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Union

from .patch import UNSET, Unset, format_timestamp, parse_timestamp

DEFAULT_EMPLOYEE_STATUS = "Active"


@dataclass
class Employee:
    id: str = ""
    name: str = ""
    email: str = ""
    status: str = ""
    link_date: Optional[datetime] = None
    role_id: str = ""  # Role id; empty means unassigned

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "status": self.status,
            "link_date": format_timestamp(self.link_date),
            "role_id": self.role_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employee":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            email=data.get("email") or "",
            status=data.get("status") or "",
            link_date=parse_timestamp(data.get("link_date")),
            role_id=data.get("role_id") or "",
        )


MaybeStr = Union[str, Unset]


@dataclass
class EmployeePatch:
    """
    Proposed changes for ``EmployeeService.update``.

    ``role_id`` is clearable: an explicit ``""`` unassigns the role.
    """

    name: MaybeStr = UNSET
    email: MaybeStr = UNSET
    status: MaybeStr = UNSET
    role_id: MaybeStr = UNSET

    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset({"role_id"})

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeePatch":
        return cls(**{f.name: getattr(employee, f.name) for f in fields(cls)})
