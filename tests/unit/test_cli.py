"""CLI dispatch: command table, usage, startup failures, exit status."""

import logging
from unittest.mock import AsyncMock

import pytest

from artisan_sync import cli
from artisan_sync.infrastructure.exceptions import DocumentStoreError
from artisan_sync.infrastructure.store.memory_store import InMemoryDocumentStore


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the root logger untouched so pytest's log capture keeps working."""
    monkeypatch.setattr(cli, "setup_logging", lambda debug=None: None)


@pytest.mark.parametrize("argv", [[], ["bogus"], ["help"], ["ADD"]])
def test_unknown_or_missing_command_prints_usage_without_store_calls(
    dataset_files, capsys, argv
) -> None:
    store = AsyncMock()
    assert cli.run(argv, store=store) == 0
    assert "Usage: artisan-sync <command>" in capsys.readouterr().out
    assert store.mock_calls == []


def test_missing_dataset_aborts_before_usage(capsys, caplog) -> None:
    with caplog.at_level(logging.ERROR):
        assert cli.run(["bogus"], store=InMemoryDocumentStore()) == 1
    assert "Usage" not in capsys.readouterr().out
    assert "artisans.json" in caplog.text


def test_artisans_command_writes_only_artisans(dataset_files) -> None:
    store = InMemoryDocumentStore({"reviews": {"keep": {"rating": 1}}})
    assert cli.run(["artisans"], store=store) == 0
    snap = store.snapshot()
    assert set(snap["artisans"]) == {"a1", "a2", "a3"}
    assert snap["reviews"] == {"keep": {"rating": 1}}
    assert store.closed


def test_reviews_command_writes_only_reviews(dataset_files) -> None:
    store = InMemoryDocumentStore()
    assert cli.run(["reviews"], store=store) == 0
    assert set(store.snapshot()) == {"reviews"}


def test_add_then_show_then_delete(dataset_files, capsys) -> None:
    store = InMemoryDocumentStore()
    assert cli.run(["add"], store=store) == 0
    assert set(store.snapshot()["artisans"]) == {"a1", "a2", "a3"}
    assert set(store.snapshot()["reviews"]) == {"r1", "r2", "r3"}

    capsys.readouterr()
    assert cli.run(["show"], store=store) == 0
    out = capsys.readouterr().out
    assert "Artisans: 3" in out
    assert "Average rating: 4.00/5" in out

    assert cli.run(["delete"], store=store) == 0
    assert store.snapshot() == {"artisans": {}, "reviews": {}}


def test_store_errors_never_change_exit_status(dataset_files) -> None:
    store = AsyncMock()
    store.upsert = AsyncMock(side_effect=DocumentStoreError("x", "HTTP 500", 500))
    assert cli.run(["add"], store=store) == 0
    assert store.upsert.await_count == 6
    store.aclose.assert_awaited_once()


def test_configured_memory_backend_is_used_without_injected_store(dataset_files) -> None:
    assert cli.run(["add"]) == 0


def test_invalid_backend_is_a_startup_failure(dataset_files, monkeypatch, capsys) -> None:
    monkeypatch.setenv("STORE_BACKEND", "sqlite")
    assert cli.run(["add"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_firestore_without_credentials_is_a_startup_failure(dataset_files, monkeypatch) -> None:
    monkeypatch.setenv("STORE_BACKEND", "firestore")
    assert cli.run(["show"]) == 1


def test_usage_does_not_need_firestore_credentials(dataset_files, monkeypatch, capsys) -> None:
    monkeypatch.setenv("STORE_BACKEND", "firestore")
    assert cli.run(["bogus"]) == 0
    assert "Usage: artisan-sync <command>" in capsys.readouterr().out


def test_firestore_with_missing_key_file_is_a_startup_failure(
    dataset_files, monkeypatch, caplog
) -> None:
    monkeypatch.setenv("STORE_BACKEND", "firestore")
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_PATH", "missing-key.json")
    with caplog.at_level(logging.WARNING):
        assert cli.run(["show"]) == 1
    assert "no Firebase service account credentials found" in caplog.text


def test_main_exits_with_run_status(dataset_files, monkeypatch) -> None:
    monkeypatch.setattr("sys.argv", ["artisan-sync"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main()
    assert exc_info.value.code == 0
