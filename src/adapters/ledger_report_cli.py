"""CLI adapter printing the ledger reports.

Set ``LEDGER_REPORT_BANK`` to also print the running balance of one bank.
"""

import os

from src.application.use_cases.get_bank_running_balance import (
    GetBankRunningBalanceUseCase,
)
from src.application.use_cases.get_ledger_report import GetLedgerReportUseCase
from src.infrastructure.container import build_ledger_store, build_settings
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print the monthly, yearly and bank report tables."""
    logger = get_app_logger()
    settings = build_settings()
    store = build_ledger_store(settings=settings)
    label = settings.currency_label

    report = GetLedgerReportUseCase(
        store,
        logger=logger,
        banks=settings.banks,
    ).execute()

    print("Monthly report")
    for row in report.monthly:
        print(
            f"{row.month}: income={label} {row.income:,.2f}, "
            f"expense={label} {row.expense:,.2f}, "
            f"saving={label} {row.saving:,.2f}"
        )
    print("Yearly report")
    for row in report.yearly:
        print(
            f"{row.year}: income={label} {row.income:,.2f}, "
            f"expense={label} {row.expense:,.2f}, "
            f"saving={label} {row.saving:,.2f}"
        )
    print("Bank balances")
    for row in report.banks:
        print(f"{row.bank}: {label} {row.balance:,.2f}")

    bank = os.getenv("LEDGER_REPORT_BANK", "").strip()
    if not bank:
        return
    if bank not in settings.banks:
        logger.warning(
            f"Unknown bank '{bank}'. Expected one of: "
            f"{', '.join(settings.banks)}"
        )
        return
    view = GetBankRunningBalanceUseCase(store, logger=logger).execute(bank)
    print(f"Running balance for {bank}")
    for entry in view.entries:
        print(
            f"{entry.date.isoformat()} {entry.kind} "
            f"{label} {entry.amount:,.2f} -> "
            f"{label} {entry.running_balance:,.2f}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
