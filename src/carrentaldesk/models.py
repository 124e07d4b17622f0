"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import const
from .exceptions import InvalidStateError, ValidationError
from .util import format_banner, format_money, format_yes_no, parse_int


class CarVariant(str, Enum):
    """Pricing tier of a car."""

    ECONOMY = const.ECONOMY
    LUXURY = const.LUXURY

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def daily_rate(self) -> float:
        return const.DAILY_RATES[self.value]

    @classmethod
    def from_selector(cls, value: str) -> CarVariant:
        """Map the car type menu selector (1 or 2) to a variant."""
        selector = parse_int(value, "car type")
        variant = const.VARIANT_SELECTORS.get(selector)
        if variant is None:
            raise ValidationError(
                f"Unknown car type selector {selector}.",
                user_message="Invalid car type selected!",
            )
        return cls(variant)


@dataclass(slots=True)
class Car:
    id: str
    model: str
    variant: CarVariant
    available: bool = True

    def daily_rate(self) -> float:
        return self.variant.daily_rate

    def mark_rented(self) -> None:
        self.available = False

    def mark_returned(self) -> None:
        self.available = True

    def describe(self) -> str:
        return (
            f"[{self.variant.label.upper()}] Car ID: {self.id}, Model: {self.model}, "
            f"Available: {format_yes_no(self.available)}, "
            f"Daily Rate: {format_money(self.daily_rate())}"
        )


@dataclass(frozen=True, slots=True)
class Customer:
    id: str
    name: str

    def describe(self) -> str:
        return f"User ID: {self.id}, Name: {self.name}"


@dataclass(slots=True)
class Rental:
    """A car rented by a customer from a start day until it is returned.

    The rental stores the ids of its car and customer; the desk that owns
    those records resolves them.
    """

    id: str
    customer_id: str
    car_id: str
    start_day: int
    return_day: int | None = None
    total_bill: float = 0.0
    active: bool = True

    @property
    def duration(self) -> int | None:
        if self.return_day is None:
            return None
        return self.return_day - self.start_day

    def compute_bill(self, daily_rate: float) -> float:
        """Bill whole days between start and return; zero when not positive."""
        if self.return_day is not None and self.return_day > self.start_day:
            self.total_bill = (self.return_day - self.start_day) * daily_rate
        return self.total_bill

    def close(self, return_day: int, car: Car) -> None:
        if not self.active:
            raise InvalidStateError(f"Rental {self.id} is already closed.")
        if car.id != self.car_id:
            raise ValidationError(f"Car {car.id} does not belong to rental {self.id}.")
        self.return_day = return_day
        self.compute_bill(car.daily_rate())
        self.active = False
        car.mark_returned()

    def describe(self, customer: Customer, car: Car) -> str:
        lines = [
            format_banner("Rental Details"),
            f"Rental ID: {self.id}",
            f"Customer: {customer.name} (ID: {customer.id})",
            f"Car: {car.model} (ID: {car.id})",
            f"Car Type: {car.variant.label}",
            f"Start Date: Day {self.start_day}",
        ]
        if self.active:
            lines.append("Status: Active (Not yet returned)")
        else:
            lines.extend(
                [
                    f"Return Date: Day {self.return_day}",
                    f"Rental Duration: {self.duration} days",
                    f"Daily Rate: {format_money(car.daily_rate())}",
                    f"Total Bill: {format_money(self.total_bill)}",
                ]
            )
        lines.append("=" * 24)
        return "\n".join(lines)
