from enum import Enum


class CancelledBy(str, Enum):
    """キャンセル実行者の区分"""

    USER = "user"
    ADMIN = "admin"
