"""Domain constants for the personal ledger."""

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_KINDS = (INCOME, EXPENSE)

LOANS_TAKEN = "taken"
LOANS_GIVEN = "given"
LOAN_KINDS = (LOANS_TAKEN, LOANS_GIVEN)

DEFAULT_BANKS = (
    "UBL",
    "JS Bank",
    "Meezan Bank",
    "ABL",
    "NayaPay",
    "Easypaisa",
    "JazzCash",
)

DEFAULT_CATEGORIES = (
    "Salary",
    "Business",
    "Freelance",
    "Investment",
    "Gift",
    "Food",
    "Transport",
    "Bills",
    "Education",
    "Health",
    "Shopping",
    "Rent",
    "Misc",
)

DEFAULT_CURRENCY_LABEL = "Rs"


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_KINDS",
    "LOANS_TAKEN",
    "LOANS_GIVEN",
    "LOAN_KINDS",
    "DEFAULT_BANKS",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CURRENCY_LABEL",
]
