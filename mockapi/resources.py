"""
Collections served by the mock API.

The cars endpoints answer with "User" wording and user/updatedUser keys; the
clients built against this server already depend on those names.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from mockapi.core.config import Settings


@dataclass(frozen=True)
class CollectionResource:
    name: str
    prefix: str
    noun: str
    created_key: str
    updated_key: str
    settings_file_attr: str

    def data_file(self, settings: Settings) -> Path:
        return getattr(settings, self.settings_file_attr)

    def not_found_message(self) -> str:
        return f"{self.noun} not found"

    def created_message(self) -> str:
        return f"{self.noun} created successfully"

    def updated_message(self, record_id: str) -> str:
        return f"{self.noun} with ID {record_id} updated successfully"

    def deleted_message(self, record_id: str) -> str:
        return f"{self.noun} with ID {record_id} deleted successfully"


CARS = CollectionResource(
    name="cars",
    prefix="/api/cars",
    noun="User",
    created_key="user",
    updated_key="updatedUser",
    settings_file_attr="cars_file",
)

BOOKINGS = CollectionResource(
    name="bookings",
    prefix="/api/bookings",
    noun="Reservation",
    created_key="reservation",
    updated_key="updatedReservation",
    settings_file_attr="bookings_file",
)

RESOURCES: Tuple[CollectionResource, ...] = (CARS, BOOKINGS)
