from .exceptions import (
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    DuplicateResourceException,
    ExceedsRefundableException,
    ForbiddenException,
    InvalidCapacityDeltaException,
    NotRefundableException,
    OptimisticLockException,
    PersistenceException,
    ResourceNotFoundException,
    SeatAlreadyBookedException,
    SeatConflictException,
    SeatNotBookedException,
    SeatNotFoundException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "SeatNotFoundException",
    "ConflictException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "SeatAlreadyBookedException",
    "SeatConflictException",
    "BusinessRuleViolationException",
    "SeatNotBookedException",
    "InvalidCapacityDeltaException",
    "NotRefundableException",
    "ExceedsRefundableException",
    "ForbiddenException",
    "PersistenceException",
]
