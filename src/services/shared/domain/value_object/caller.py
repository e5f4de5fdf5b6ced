from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .identifiers import UserId


class Role(str, Enum):
    """利用者ロール"""

    USER = "user"
    ADMIN = "admin"
    DRIVER = "driver"


@dataclass(frozen=True)
class Caller:
    """認証済みの呼び出し元（id + role）"""

    user_id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles

    def can_act_for(self, owner_id: UserId) -> bool:
        """本人または管理者か"""
        return self.is_admin or self.user_id == owner_id
