"""Domain-specific exceptions for the ledger engine."""


class LedgerError(Exception):
    """Base exception for the ledger domain."""


class LedgerValidationError(LedgerError, ValueError):
    """Input violates a precondition of the ledger engine."""


class InvalidAmountError(LedgerValidationError):
    """Amount is missing, malformed, or outside its allowed range."""


class InvalidDateError(LedgerValidationError):
    """Date is not a valid ISO calendar date."""


class InvalidScheduleError(LedgerValidationError):
    """Installment schedule parameters are invalid."""


class InvalidLoanError(LedgerValidationError):
    """Loan payload is incomplete or inconsistent."""


class UnknownChoiceError(LedgerValidationError):
    """Value is outside a closed, configured set."""


class LedgerNotFoundError(LedgerError, LookupError):
    """Referenced ledger record does not exist."""


class TransactionNotFoundError(LedgerNotFoundError):
    """No transaction matches the given id."""


class LoanNotFoundError(LedgerNotFoundError):
    """No loan matches the given id."""


class InstallmentNotFoundError(LedgerNotFoundError):
    """No installment matches the given id within the loan."""


class LedgerStoreError(LedgerError, RuntimeError):
    """Ledger snapshot could not be loaded or saved."""


__all__ = [
    "LedgerError",
    "LedgerValidationError",
    "InvalidAmountError",
    "InvalidDateError",
    "InvalidScheduleError",
    "InvalidLoanError",
    "UnknownChoiceError",
    "LedgerNotFoundError",
    "TransactionNotFoundError",
    "LoanNotFoundError",
    "InstallmentNotFoundError",
    "LedgerStoreError",
]
