from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .entity import SoftDeletable as SoftDeletable
from .event import DomainEvent as DomainEvent
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    ConflictException as ConflictException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    ForbiddenException as ForbiddenException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository
from .value_object import (
    BusId as BusId,
)
from .value_object import (
    Caller as Caller,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    Role as Role,
)
from .value_object import (
    RouteId as RouteId,
)
from .value_object import (
    TripId as TripId,
)
from .value_object import (
    UserId as UserId,
)
from .value_object import (
    generate_reference_number as generate_reference_number,
)
