from __future__ import annotations

from docmanager.domain import Role, RolePatch

from .base import EntityService


class RoleService(EntityService[Role, RolePatch]):
    entity_name = "role"
    entity_type = Role
    patch_type = RolePatch
