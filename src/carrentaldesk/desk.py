"""Rental desk state and operations."""

from __future__ import annotations

import logging

from .const import FIRST_RENTAL_COUNTER, RENTAL_ID_PREFIX
from .exceptions import (
    DuplicateIdentityError,
    EmptyCollectionError,
    InvalidStateError,
    NotFoundError,
)
from .models import Car, CarVariant, Customer, Rental
from .util import normalize_identifier

_LOGGER = logging.getLogger(__name__)


class RentalDesk:
    """Owns the fleet, the customers and the rentals of one desk.

    Collections are append-only and keep insertion order. Every operation
    either applies its single change or raises a ``CarRentalDeskError``
    subclass without touching state.
    """

    def __init__(self) -> None:
        self._cars: list[Car] = []
        self._customers: list[Customer] = []
        self._rentals: list[Rental] = []
        self._next_rental_counter = FIRST_RENTAL_COUNTER

    @property
    def cars(self) -> tuple[Car, ...]:
        return tuple(self._cars)

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def rentals(self) -> tuple[Rental, ...]:
        return tuple(self._rentals)

    @property
    def next_rental_counter(self) -> int:
        return self._next_rental_counter

    def find_car(self, car_id: str) -> Car | None:
        for car in self._cars:
            if car.id == car_id:
                return car
        return None

    def find_customer(self, customer_id: str) -> Customer | None:
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def get_car(self, car_id: str) -> Car:
        car = self.find_car(car_id)
        if car is None:
            raise NotFoundError(
                f"Car {car_id} not found.",
                user_message=f"Error: Car with ID '{car_id}' not found!",
            )
        return car

    def get_customer(self, customer_id: str) -> Customer:
        customer = self.find_customer(customer_id)
        if customer is None:
            raise NotFoundError(
                f"Customer {customer_id} not found.",
                user_message=f"Error: User with ID '{customer_id}' not found!",
            )
        return customer

    def available_cars(self) -> list[Car]:
        return [car for car in self._cars if car.available]

    def active_rentals(self) -> list[Rental]:
        return [rental for rental in self._rentals if rental.active]

    def car_for(self, rental: Rental) -> Car:
        return self.get_car(rental.car_id)

    def customer_for(self, rental: Rental) -> Customer:
        return self.get_customer(rental.customer_id)

    def check_new_car_id(self, car_id: str) -> str:
        car_id = normalize_identifier(car_id, "car id")
        if self.find_car(car_id) is not None:
            raise DuplicateIdentityError(
                f"Car {car_id} already exists.",
                user_message=f"Error: Car with ID '{car_id}' already exists!",
            )
        return car_id

    def check_new_customer_id(self, customer_id: str) -> str:
        customer_id = normalize_identifier(customer_id, "user id")
        if self.find_customer(customer_id) is not None:
            raise DuplicateIdentityError(
                f"Customer {customer_id} already exists.",
                user_message=f"Error: User with ID '{customer_id}' already exists!",
            )
        return customer_id

    def add_car(self, car_id: str, model: str, variant: CarVariant) -> Car:
        _LOGGER.debug("Desk add_car started for %s", car_id)
        car_id = self.check_new_car_id(car_id)
        car = Car(id=car_id, model=model.strip(), variant=CarVariant(variant))
        self._cars.append(car)
        _LOGGER.info("Car %s added (%s)", car.id, car.variant.label)
        return car

    def add_customer(self, customer_id: str, name: str) -> Customer:
        _LOGGER.debug("Desk add_customer started for %s", customer_id)
        customer_id = self.check_new_customer_id(customer_id)
        customer = Customer(id=customer_id, name=name.strip())
        self._customers.append(customer)
        _LOGGER.info("Customer %s added", customer.id)
        return customer

    def check_can_rent(self) -> None:
        if not self._cars:
            raise EmptyCollectionError(
                "Fleet is empty.",
                user_message="No cars available in the fleet!",
            )
        if not self._customers:
            raise EmptyCollectionError(
                "No customers registered.",
                user_message="No users registered in the system!",
            )
        if not self.available_cars():
            raise InvalidStateError(
                "Every car is rented.",
                user_message="No cars currently available for rent!",
            )

    def rent_car(self, car_id: str, customer_id: str, start_day: int) -> Rental:
        _LOGGER.debug("Desk rent_car started for car %s", car_id)
        self.check_can_rent()
        car = self.get_car(normalize_identifier(car_id, "car id"))
        if not car.available or self._active_rental_for_car(car.id) is not None:
            raise InvalidStateError(
                f"Car {car.id} is already rented.",
                user_message="Error: Car is not available for rent!",
            )
        customer = self.get_customer(normalize_identifier(customer_id, "user id"))
        rental_id = f"{RENTAL_ID_PREFIX}{self._next_rental_counter}"
        self._next_rental_counter += 1
        rental = Rental(
            id=rental_id,
            customer_id=customer.id,
            car_id=car.id,
            start_day=start_day,
        )
        self._rentals.append(rental)
        car.mark_rented()
        _LOGGER.info("Rental %s opened: car %s to %s", rental.id, car.id, customer.id)
        return rental

    def _active_rental_for_car(self, car_id: str) -> Rental | None:
        for rental in self._rentals:
            if rental.active and rental.car_id == car_id:
                return rental
        return None

    def check_can_return(self) -> None:
        if not self._rentals:
            raise EmptyCollectionError(
                "No rentals recorded.",
                user_message="No active rentals found!",
            )
        if not self.active_rentals():
            raise InvalidStateError(
                "Every rental is closed.",
                user_message="No active rentals to return!",
            )

    def find_active_rental(self, search_key: str) -> Rental:
        """Return the first active rental whose id or car id equals the key."""
        for rental in self._rentals:
            if rental.active and search_key in (rental.id, rental.car_id):
                return rental
        raise NotFoundError(
            f"No active rental matches {search_key}.",
            user_message=f"Error: No active rental found with ID '{search_key}'!",
        )

    def return_car(self, search_key: str, return_day: int) -> Rental:
        _LOGGER.debug("Desk return_car started for %s", search_key)
        self.check_can_return()
        rental = self.find_active_rental(normalize_identifier(search_key, "rental or car id"))
        rental.close(return_day, self.car_for(rental))
        _LOGGER.info("Rental %s closed, bill %.2f", rental.id, rental.total_bill)
        return rental

    def rental_report(self, rental: Rental) -> str:
        return rental.describe(self.customer_for(rental), self.car_for(rental))
