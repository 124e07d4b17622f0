import io
import logging

import pytest

from carrentaldesk.console import Console
from carrentaldesk.desk import RentalDesk
from carrentaldesk.models import CarVariant
from carrentaldesk.shell import DeskShell, OperationResult


def _shell(lines: list[str], desk: RentalDesk | None = None) -> tuple[DeskShell, io.StringIO]:
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    shell = DeskShell(desk, console=Console(stdin=stdin, stdout=stdout), show_banner=False)
    return shell, stdout


@pytest.fixture
def seeded_desk() -> RentalDesk:
    desk = RentalDesk()
    desk.add_customer("U1", "Alice")
    desk.add_car("C1", "Civic", CarVariant.ECONOMY)
    return desk


def test_add_car_prompts_in_order() -> None:
    shell, stdout = _shell(["C1", "Honda Civic", "1"])

    result = shell.add_car()

    assert result == OperationResult(ok=True, message="Economy car added successfully!")
    output = stdout.getvalue()
    assert output.index("Enter Car ID: ") < output.index("Enter Car Model: ")
    assert output.index("Enter Car Model: ") < output.index("1. Economy Car ($50/day)")
    assert "2. Luxury Car ($150/day)" in output
    car = shell.desk.get_car("C1")
    assert car.model == "Honda Civic"
    assert car.variant is CarVariant.ECONOMY


def test_add_car_duplicate_stops_after_id(seeded_desk: RentalDesk) -> None:
    shell, stdout = _shell(["C1", "should not be read"], seeded_desk)

    result = shell.add_car()

    assert result.ok is False
    assert result.error_code == "duplicate_identity"
    assert "Error: Car with ID 'C1' already exists!" in stdout.getvalue()
    assert "Enter Car Model: " not in stdout.getvalue()
    assert len(seeded_desk.cars) == 1


def test_add_car_invalid_type(seeded_desk: RentalDesk) -> None:
    shell, stdout = _shell(["C2", "Corolla", "3"], seeded_desk)

    result = shell.add_car()

    assert result.ok is False
    assert result.error_code == "validation_error"
    assert "Invalid car type selected!" in stdout.getvalue()
    assert len(seeded_desk.cars) == 1


def test_add_car_non_numeric_type(seeded_desk: RentalDesk) -> None:
    shell, _ = _shell(["C2", "Corolla", "luxury"], seeded_desk)

    result = shell.add_car()

    assert result.error_code == "malformed_input"
    assert len(seeded_desk.cars) == 1


def test_add_customer_duplicate_keeps_size(seeded_desk: RentalDesk) -> None:
    shell, stdout = _shell(["U1"], seeded_desk)

    result = shell.add_customer()

    assert result.error_code == "duplicate_identity"
    assert "Error: User with ID 'U1' already exists!" in stdout.getvalue()
    assert len(seeded_desk.customers) == 1


def test_add_customer_keeps_full_name() -> None:
    shell, _ = _shell(["U2", "Ada Lovelace"])

    assert shell.add_customer().ok is True
    assert shell.desk.get_customer("U2").name == "Ada Lovelace"


def test_rent_car_lists_available_cars_and_reports_id(seeded_desk: RentalDesk) -> None:
    shell, stdout = _shell(["C1", "U1", "10"], seeded_desk)

    result = shell.rent_car()

    assert result == OperationResult(ok=True, message="R1")
    output = stdout.getvalue()
    assert "=== Available Cars ===" in output
    assert "[ECONOMY] Car ID: C1, Model: Civic, Available: Yes" in output
    assert "Car rented successfully!" in output
    assert "Rental ID: R1" in output
    assert seeded_desk.get_car("C1").available is False


def test_rent_car_on_empty_fleet_does_not_prompt() -> None:
    shell, stdout = _shell([])

    result = shell.rent_car()

    assert result.error_code == "empty_collection"
    assert "No cars available in the fleet!" in stdout.getvalue()
    assert "Enter" not in stdout.getvalue()


def test_rent_car_bad_start_day(seeded_desk: RentalDesk) -> None:
    shell, stdout = _shell(["C1", "U1", "tomorrow"], seeded_desk)

    result = shell.rent_car()

    assert result.error_code == "malformed_input"
    assert "Invalid input! Please enter a number." in stdout.getvalue()
    assert seeded_desk.rentals == ()
    assert seeded_desk.get_car("C1").available is True


def test_return_car_prints_report(seeded_desk: RentalDesk) -> None:
    seeded_desk.rent_car("C1", "U1", 10)
    shell, stdout = _shell(["R1", "15"], seeded_desk)

    result = shell.return_car()

    assert result == OperationResult(ok=True, message="R1")
    output = stdout.getvalue()
    assert "Rental ID: R1, Car ID: C1, Model: Civic" in output
    assert "Car returned successfully!" in output
    assert "Total Bill: $250.00" in output


def test_return_car_with_no_rentals_does_not_prompt() -> None:
    shell, stdout = _shell([])

    result = shell.return_car()

    assert result.error_code == "empty_collection"
    assert "No active rentals found!" in stdout.getvalue()
    assert "Enter" not in stdout.getvalue()


def test_return_car_unknown_key(seeded_desk: RentalDesk) -> None:
    seeded_desk.rent_car("C1", "U1", 10)
    shell, stdout = _shell(["R7", "15"], seeded_desk)

    result = shell.return_car()

    assert result.error_code == "not_found"
    assert "Error: No active rental found with ID 'R7'!" in stdout.getvalue()
    assert seeded_desk.rentals[0].active is True


@pytest.mark.parametrize(
    ("operation", "message"),
    [
        ("list_cars", "No cars in the fleet!"),
        ("list_customers", "No users registered!"),
        ("list_rentals", "No rentals found!"),
    ],
)
def test_list_operations_report_empty(operation: str, message: str) -> None:
    shell, stdout = _shell([])

    result = getattr(shell, operation)()

    assert result.error_code == "empty_collection"
    assert message in stdout.getvalue()


def test_list_operations_enumerate(seeded_desk: RentalDesk) -> None:
    seeded_desk.add_customer("U2", "Bob")
    seeded_desk.rent_car("C1", "U2", 3)
    shell, stdout = _shell([], seeded_desk)

    assert shell.list_cars().ok is True
    assert shell.list_customers().ok is True
    assert shell.list_rentals().ok is True

    output = stdout.getvalue()
    assert "=== All Cars in Fleet ===" in output
    assert output.index("User ID: U1, Name: Alice") < output.index("User ID: U2, Name: Bob")
    assert "=== All Rentals ===" in output
    assert "Status: Active (Not yet returned)" in output


def test_dispatch_rejects_out_of_range_choice() -> None:
    shell, stdout = _shell([])

    result = shell.dispatch(9)

    assert result.ok is False
    assert result.error_code == "invalid_choice"
    assert "Invalid choice! Please enter a number between 1-8." in stdout.getvalue()


def test_run_full_session() -> None:
    shell, stdout = _shell(
        [
            "2", "U1", "Alice",
            "2", "U1",
            "1", "C1", "Civic", "1",
            "3", "C1", "U1", "10",
            "4", "R1", "15",
            "8",
        ]
    )

    assert shell.run() == 0

    desk = shell.desk
    assert len(desk.customers) == 1
    rental = desk.rentals[0]
    assert rental.total_bill == 250.0
    assert rental.active is False
    assert desk.get_car("C1").available is True
    assert "Total Bill: $250.00" in stdout.getvalue()


def test_run_recovers_from_bad_menu_input() -> None:
    shell, stdout = _shell(["abc", "0", "42", "6", "8"])

    assert shell.run() == 0

    output = stdout.getvalue()
    assert output.count("Invalid input! Please enter a number.") == 1
    assert output.count("Invalid choice! Please enter a number between 1-8.") == 2
    assert "No users registered!" in output
    assert output.count("Enter your choice (1-8): ") == 5


def test_run_ends_on_end_of_input() -> None:
    shell, stdout = _shell(["1", "C1"])

    assert shell.run() == 0
    assert shell.desk.cars == ()
    assert stdout.getvalue().count("-----------Car Rental Service System--------") == 1


def test_run_prints_banners() -> None:
    stdout = io.StringIO()
    shell = DeskShell(console=Console(stdin=io.StringIO("8\n"), stdout=stdout))

    assert shell.run() == 0

    output = stdout.getvalue()
    assert output.startswith("Welcome to the Car Rental Service Simulator!")
    assert "Thank you for using Car Rental Service!" in output
    assert output.rstrip().endswith("Goodbye!")


def test_rent_car_lists_only_available_cars(seeded_desk: RentalDesk) -> None:
    seeded_desk.add_car("L1", "S-Class", CarVariant.LUXURY)
    seeded_desk.rent_car("C1", "U1", 1)
    shell, stdout = _shell(["L1", "U1", "2"], seeded_desk)

    assert shell.rent_car().ok is True

    output = stdout.getvalue()
    listing = output[
        output.index("=== Available Cars ===") : output.index("Enter Car ID to rent: ")
    ]
    assert "Car ID: L1" in listing
    assert "Car ID: C1" not in listing


def test_return_car_lists_only_active_rentals(seeded_desk: RentalDesk) -> None:
    seeded_desk.add_car("L1", "S-Class", CarVariant.LUXURY)
    seeded_desk.rent_car("C1", "U1", 1)
    seeded_desk.rent_car("L1", "U1", 1)
    seeded_desk.return_car("R1", 3)
    shell, stdout = _shell(["R2", "4"], seeded_desk)

    assert shell.return_car().ok is True

    output = stdout.getvalue()
    listing = output[
        output.index("=== Active Rentals ===") : output.index("Enter Rental ID or Car ID: ")
    ]
    assert "Rental ID: R2, Car ID: L1, Model: S-Class" in listing
    assert "Rental ID: R1" not in listing


def test_end_of_input_finishes_the_prompt_line() -> None:
    stdout = io.StringIO()
    shell = DeskShell(console=Console(stdin=io.StringIO(""), stdout=stdout))

    assert shell.run() == 0

    assert "Enter your choice (1-8): \nThank you for using Car Rental Service!" in stdout.getvalue()


def test_rejected_operation_is_logged(
    seeded_desk: RentalDesk,
    caplog: pytest.LogCaptureFixture,
) -> None:
    shell, _ = _shell(["C1"], seeded_desk)

    with caplog.at_level(logging.INFO, logger="carrentaldesk.shell"):
        result = shell.add_car()

    assert result.ok is False
    records = [record for record in caplog.records if record.name == "carrentaldesk.shell"]
    assert [record.levelno for record in records] == [logging.INFO]
    assert records[0].getMessage() == (
        "Operation add_car rejected (duplicate_identity): Car C1 already exists."
    )
