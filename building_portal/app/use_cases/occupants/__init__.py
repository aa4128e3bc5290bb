"""
Occupant Use Cases

Registration and maintenance of occupants on leased units.
"""

from .list_occupants_use_case import ListOccupantsUseCase
from .create_occupant_use_case import CreateOccupantUseCase
from .update_occupant_use_case import UpdateOccupantUseCase
from .delete_occupant_use_case import DeleteOccupantUseCase
from .register_occupants_use_case import RegisterOccupantsUseCase
from .dtos import CreateOccupantCommand, OccupantResponse, RegisterOccupantsResponse

__all__ = [
    # Use Cases
    "ListOccupantsUseCase",
    "CreateOccupantUseCase",
    "UpdateOccupantUseCase",
    "DeleteOccupantUseCase",
    "RegisterOccupantsUseCase",
    # DTOs - Commands
    "CreateOccupantCommand",
    # DTOs - Responses
    "OccupantResponse",
    "RegisterOccupantsResponse",
]
