"""Menu-driven shell around a rental desk."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .console import Console
from .const import (
    DAILY_RATES,
    EXIT_CHOICE,
    GOODBYE_MESSAGES,
    MENU_LABELS,
    MENU_TITLE,
    VARIANT_SELECTORS,
    WELCOME_MESSAGE,
)
from .desk import RentalDesk
from .exceptions import CarRentalDeskError, EmptyCollectionError, MalformedInputError
from .models import CarVariant
from .util import format_banner, normalize_identifier, parse_day, parse_int

_LOGGER = logging.getLogger(__name__)

_INVALID_NUMBER_MESSAGE = "Invalid input! Please enter a number."


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of one menu operation: ok, or the error kind that stopped it."""

    ok: bool
    error_code: str | None = None
    message: str | None = None

    @classmethod
    def success(cls, message: str | None = None) -> OperationResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, exc: CarRentalDeskError) -> OperationResult:
        return cls(ok=False, error_code=exc.error_code, message=exc.user_message or str(exc))


class DeskShell:
    """Runs the interactive menu loop for one ``RentalDesk``."""

    def __init__(
        self,
        desk: RentalDesk | None = None,
        *,
        console: Console | None = None,
        show_banner: bool = True,
    ) -> None:
        self._desk = desk if desk is not None else RentalDesk()
        self._console = console if console is not None else Console()
        self._show_banner = show_banner
        self._handlers: dict[int, Callable[[], OperationResult]] = {
            1: self.add_car,
            2: self.add_customer,
            3: self.rent_car,
            4: self.return_car,
            5: self.list_cars,
            6: self.list_customers,
            7: self.list_rentals,
        }

    @property
    def desk(self) -> RentalDesk:
        return self._desk

    def run(self) -> int:
        """Loop over the menu until Exit or end of input; return the exit status."""
        if self._show_banner:
            self._console.write(WELCOME_MESSAGE)
        while True:
            self._show_menu()
            try:
                raw = self._console.prompt(f"Enter your choice (1-{EXIT_CHOICE}): ")
            except EOFError:
                _LOGGER.info("Input closed at the menu prompt")
                break
            try:
                choice = parse_int(raw, "menu choice")
            except MalformedInputError:
                self._say(_INVALID_NUMBER_MESSAGE)
                continue
            if choice == EXIT_CHOICE:
                break
            try:
                self.dispatch(choice)
            except EOFError:
                _LOGGER.info("Input closed during menu choice %s", choice)
                break
        if self._show_banner:
            self._console.write_lines(list(GOODBYE_MESSAGES))
        return 0

    def dispatch(self, choice: int) -> OperationResult:
        handler = self._handlers.get(choice)
        if handler is None:
            message = f"Invalid choice! Please enter a number between 1-{EXIT_CHOICE}."
            self._say(message)
            return OperationResult(ok=False, error_code="invalid_choice", message=message)
        return handler()

    def add_car(self) -> OperationResult:
        return self._execute("add_car", self._add_car)

    def add_customer(self) -> OperationResult:
        return self._execute("add_customer", self._add_customer)

    def rent_car(self) -> OperationResult:
        return self._execute("rent_car", self._rent_car)

    def return_car(self) -> OperationResult:
        return self._execute("return_car", self._return_car)

    def list_cars(self) -> OperationResult:
        return self._execute("list_cars", self._list_cars)

    def list_customers(self) -> OperationResult:
        return self._execute("list_customers", self._list_customers)

    def list_rentals(self) -> OperationResult:
        return self._execute("list_rentals", self._list_rentals)

    def _execute(self, name: str, operation: Callable[[], str | None]) -> OperationResult:
        _LOGGER.debug("Operation %s started", name)
        try:
            message = operation()
        except CarRentalDeskError as exc:
            result = OperationResult.failure(exc)
            self._say(result.message or "")
            _LOGGER.info("Operation %s rejected (%s): %s", name, exc.error_code, exc)
            return result
        _LOGGER.debug("Operation %s completed", name)
        return OperationResult.success(message)

    def _say(self, message: str) -> None:
        self._console.write(message)
        self._console.write()

    def _show_menu(self) -> None:
        self._console.write(MENU_TITLE)
        for number, label in enumerate(MENU_LABELS, start=1):
            self._console.write(f"{number}. {label}")

    def _add_car(self) -> str:
        self._console.write()
        self._console.write(format_banner("Add New Car"))
        car_id = self._desk.check_new_car_id(self._console.prompt("Enter Car ID: "))
        model = self._console.prompt("Enter Car Model: ")
        self._console.write("Select Car Type:")
        for selector, variant in VARIANT_SELECTORS.items():
            label = CarVariant(variant).label
            self._console.write(f"{selector}. {label} Car (${DAILY_RATES[variant]:.0f}/day)")
        variant = CarVariant.from_selector(
            self._console.prompt(f"Enter choice (1-{len(VARIANT_SELECTORS)}): ")
        )
        car = self._desk.add_car(car_id, model, variant)
        message = f"{car.variant.label} car added successfully!"
        self._say(message)
        return message

    def _add_customer(self) -> str:
        self._console.write()
        self._console.write(format_banner("Add New User"))
        customer_id = self._desk.check_new_customer_id(self._console.prompt("Enter User ID: "))
        name = self._console.prompt("Enter User Name: ")
        self._desk.add_customer(customer_id, name)
        message = "User added successfully!"
        self._say(message)
        return message

    def _rent_car(self) -> str:
        self._desk.check_can_rent()
        self._console.write()
        self._console.write(format_banner("Available Cars"))
        for car in self._desk.available_cars():
            self._console.write(car.describe())
        self._console.write()
        car_id = normalize_identifier(self._console.prompt("Enter Car ID to rent: "), "car id")
        customer_id = normalize_identifier(self._console.prompt("Enter User ID: "), "user id")
        start_day = parse_day(self._console.prompt("Enter start date (day number): "))
        rental = self._desk.rent_car(car_id, customer_id, start_day)
        self._console.write("Car rented successfully!")
        self._say(f"Rental ID: {rental.id}")
        return rental.id

    def _return_car(self) -> str:
        self._desk.check_can_return()
        self._console.write()
        self._console.write(format_banner("Active Rentals"))
        for rental in self._desk.active_rentals():
            car = self._desk.car_for(rental)
            self._console.write(
                f"Rental ID: {rental.id}, Car ID: {car.id}, Model: {car.model}"
            )
        self._console.write()
        search_key = normalize_identifier(
            self._console.prompt("Enter Rental ID or Car ID: "), "rental or car id"
        )
        return_day = parse_day(self._console.prompt("Enter return date (day number): "))
        rental = self._desk.return_car(search_key, return_day)
        self._console.write("Car returned successfully!")
        self._say(self._desk.rental_report(rental))
        return rental.id

    def _list_cars(self) -> None:
        cars = self._desk.cars
        if not cars:
            raise EmptyCollectionError("Fleet is empty.", user_message="No cars in the fleet!")
        self._console.write()
        self._console.write(format_banner("All Cars in Fleet"))
        for car in cars:
            self._console.write(car.describe())
        self._console.write()

    def _list_customers(self) -> None:
        customers = self._desk.customers
        if not customers:
            raise EmptyCollectionError(
                "No customers registered.",
                user_message="No users registered!",
            )
        self._console.write()
        self._console.write(format_banner("All Registered Users"))
        for customer in customers:
            self._console.write(customer.describe())
        self._console.write()

    def _list_rentals(self) -> None:
        rentals = self._desk.rentals
        if not rentals:
            raise EmptyCollectionError("No rentals recorded.", user_message="No rentals found!")
        self._console.write()
        self._console.write(format_banner("All Rentals"))
        for rental in rentals:
            self._say(self._desk.rental_report(rental))
