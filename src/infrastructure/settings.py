"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import (
    DEFAULT_BANKS,
    DEFAULT_CATEGORIES,
    DEFAULT_CURRENCY_LABEL,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("sqlalchemy", "json")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger store and its closed value sets.

    Attributes:
        backend: Store backend identifier (sqlalchemy or json).
        json_file: Path of the JSON ledger file for the json backend.
        banks: Closed set of banks, in display order.
        categories: Closed set of transaction categories.
        currency_label: Label shown next to amounts.
    """

    backend: str = "sqlalchemy"
    json_file: Path | None = None
    banks: tuple[str, ...] = DEFAULT_BANKS
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    currency_label: str = DEFAULT_CURRENCY_LABEL

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If LEDGER_BACKEND names an unsupported backend.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("LEDGER_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported ledger backend: {backend}. "
                "Expected sqlalchemy or json."
            )
        raw_json = os.getenv("LEDGER_JSON_FILE")
        json_file = (
            cls._normalize_path(raw_json, logger=logger)
            if raw_json
            else get_project_root() / "data" / "ledger.json"
        )
        return cls(
            backend=backend,
            json_file=json_file,
            banks=cls._parse_list(os.getenv("LEDGER_BANKS"), DEFAULT_BANKS),
            categories=cls._parse_list(
                os.getenv("LEDGER_CATEGORIES"),
                DEFAULT_CATEGORIES,
            ),
            currency_label=(
                os.getenv("LEDGER_CURRENCY_LABEL", "").strip()
                or DEFAULT_CURRENCY_LABEL
            ),
        )

    @staticmethod
    def _parse_list(
        raw_value: str | None,
        default: tuple[str, ...],
    ) -> tuple[str, ...]:
        """Parse a comma-separated list, dropping blanks and duplicates.

        Args:
            raw_value: Raw environment value.
            default: Values used when the variable is unset or blank.

        Returns:
            tuple[str, ...]: Parsed values in their original order.
        """
        if not raw_value:
            return default
        values: list[str] = []
        for item in raw_value.split(","):
            cleaned = item.strip()
            if cleaned and cleaned not in values:
                values.append(cleaned)
        return tuple(values) or default

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the JSON ledger path or file URI.

        Args:
            raw_path: Raw file path or ``file://`` URI.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.parent.exists():
            logger.warning(
                f"Ledger JSON directory does not exist yet at {path.parent}"
            )
        return path


__all__ = ["LedgerSettings", "SUPPORTED_BACKENDS"]
