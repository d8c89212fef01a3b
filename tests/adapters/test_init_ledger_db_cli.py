"""Tests for the init_ledger_db_cli adapter."""

from unittest.mock import MagicMock

from sqlalchemy import create_engine, inspect

from src.adapters import init_ledger_db_cli


def test_main_checks_connection_and_creates_tables(
    monkeypatch,
    tmp_path,
    capsys,
):
    """The CLI should run a health check and prepare the schema."""
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}", future=True)

    class _Adapter:
        def get_ledger_engine(self):
            return engine

    logger = MagicMock()
    monkeypatch.setattr(
        init_ledger_db_cli,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(init_ledger_db_cli, "get_app_logger", lambda: logger)

    init_ledger_db_cli.main()

    assert "ledger_transactions" in inspect(engine).get_table_names()
    assert "Ledger DB" in logger.info.call_args_list[0].args[0]
    assert "Ledger database ready" in capsys.readouterr().out
    engine.dispose()
