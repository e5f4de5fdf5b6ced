from .event_publisher import EventPublisher as EventPublisher
from .optimistic_retry import retry_on_conflict as retry_on_conflict
from .unit_of_work import UnitOfWork as UnitOfWork
