from .aggregate import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .soft_deletable import SoftDeletable as SoftDeletable
