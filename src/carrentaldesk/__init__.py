"""carrentaldesk package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .console import Console
from .desk import RentalDesk
from .exceptions import (
    CarRentalDeskError,
    DuplicateIdentityError,
    EmptyCollectionError,
    InvalidStateError,
    MalformedInputError,
    NotFoundError,
    ValidationError,
)
from .models import Car, CarVariant, Customer, Rental
from .shell import DeskShell, OperationResult

try:
    __version__ = version("carrentaldesk")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "Car",
    "CarRentalDeskError",
    "CarVariant",
    "Console",
    "Customer",
    "DeskShell",
    "DuplicateIdentityError",
    "EmptyCollectionError",
    "InvalidStateError",
    "MalformedInputError",
    "NotFoundError",
    "OperationResult",
    "Rental",
    "RentalDesk",
    "ValidationError",
    "__version__",
]
