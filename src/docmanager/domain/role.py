"""
Role domain model.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, FrozenSet, Union

from .patch import UNSET, Unset


@dataclass
class Role:
    id: str = ""
    name: str = ""
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Role":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
        )


@dataclass
class RolePatch:
    name: Union[str, Unset] = UNSET
    description: Union[str, Unset] = UNSET

    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset()

    @classmethod
    def from_entity(cls, role: Role) -> "RolePatch":
        return cls(**{f.name: getattr(role, f.name) for f in fields(cls)})
