"""Constants for the rental desk."""

ECONOMY = "economy"
LUXURY = "luxury"

DAILY_RATES = {
    ECONOMY: 50.0,
    LUXURY: 150.0,
}

# Car type menu: selector -> variant value.
VARIANT_SELECTORS = {
    1: ECONOMY,
    2: LUXURY,
}

RENTAL_ID_PREFIX = "R"
FIRST_RENTAL_COUNTER = 1

MENU_TITLE = "-----------Car Rental Service System--------"
MENU_LABELS = (
    "Add New Car",
    "Add New User",
    "Rent a Car",
    "Return a Car",
    "View All Cars",
    "View All Users",
    "View All Rentals",
    "Exit",
)
EXIT_CHOICE = len(MENU_LABELS)

WELCOME_MESSAGE = "Welcome to the Car Rental Service Simulator!"
GOODBYE_MESSAGES = (
    "Thank you for using Car Rental Service!",
    "Goodbye!",
)
