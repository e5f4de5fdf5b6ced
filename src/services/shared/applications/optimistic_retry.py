from collections.abc import Callable
from typing import TypeVar

from aws_lambda_powertools import Logger

from services.shared.domain.exception import (
    ConflictException,
    OptimisticLockException,
)

T = TypeVar("T")

logger = Logger(child=True)


def retry_on_conflict(
    operation: Callable[[], T],
    max_attempts: int,
    description: str,
) -> T:
    """楽観ロック競合時に operation を再実行する

    operation は毎回最新の状態を読み直して検証からやり直すこと。
    max_attempts 回すべて競合した場合は ConflictException。
    """
    for attempt in range(1, max_attempts + 1):
        try:
            return operation()
        except OptimisticLockException:
            logger.warning(
                "Optimistic lock conflict",
                extra={"operation": description, "attempt": attempt},
            )
    raise ConflictException(
        f"Could not {description} due to concurrent updates, please retry"
    )
