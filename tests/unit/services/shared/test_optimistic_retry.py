from unittest.mock import MagicMock

import pytest

from services.shared.applications import retry_on_conflict
from services.shared.domain import (
    ConflictException,
    OptimisticLockException,
    ValidationException,
)


class TestRetryOnConflict:
    def test_returns_result_of_first_successful_attempt(self):
        operation = MagicMock(side_effect=[OptimisticLockException("busy"), "done"])

        assert retry_on_conflict(operation, 3, "do work") == "done"
        assert operation.call_count == 2

    def test_raises_conflict_after_last_attempt(self):
        operation = MagicMock(side_effect=OptimisticLockException("busy"))

        with pytest.raises(ConflictException) as exc_info:
            retry_on_conflict(operation, 3, "do work")

        assert not isinstance(exc_info.value, OptimisticLockException)
        assert "do work" in str(exc_info.value)
        assert operation.call_count == 3

    def test_other_errors_are_not_retried(self):
        operation = MagicMock(side_effect=ValidationException("bad"))

        with pytest.raises(ValidationException):
            retry_on_conflict(operation, 3, "do work")

        operation.assert_called_once()
