from dataclasses import dataclass

from services.shared.domain.value_object.identifiers import Identifier


@dataclass(frozen=True)
class BookingId(Identifier):
    """予約ID"""
