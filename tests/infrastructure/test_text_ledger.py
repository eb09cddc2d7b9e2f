"""Tests for the text-file ledger: ID recovery and dual append."""

import logging
from datetime import datetime

import pytest

from wansilog.domain.model.catalog import DEFAULT_CATALOG
from wansilog.domain.model.order import Order
from wansilog.infrastructure.persistence.text_ledger import (
    TextFileLedger,
    parse_transaction_id,
)

SALE_TIME = datetime(2024, 6, 1, 9, 30, 5)


def _block(transaction_id) -> str:
    return (
        f"Transaction ID: {transaction_id}\n"
        "Date & Time: 2024-05-31 18:00:00\n"
        "Cashier: karl\n"
        "Items Purchased:\n"
        "  - Tapsilog x1 (Rice) - $90.00\n"
        "Total Amount: $90.00\n"
        "=============================================\n"
    )


def _ledger(tmp_path) -> TextFileLedger:
    return TextFileLedger(tmp_path / "transactions.txt", tmp_path / "transactions_backup.txt")


def _order() -> Order:
    order = Order(DEFAULT_CATALOG)
    order.add_line(0, 2, 2)
    order.add_line(3, 3, 1)
    return order


class TestRecoverNextId:

    def test_absent_log_starts_at_one(self, tmp_path):
        assert _ledger(tmp_path).next_id == 1

    def test_empty_log_starts_at_one(self, tmp_path):
        (tmp_path / "transactions.txt").write_text("", encoding="utf-8")
        assert _ledger(tmp_path).next_id == 1

    def test_continues_after_highest_id(self, tmp_path):
        (tmp_path / "transactions.txt").write_text(
            _block(1) + _block(2) + _block(3), encoding="utf-8"
        )
        assert _ledger(tmp_path).recover_next_id() == 4

    def test_uses_maximum_not_last(self, tmp_path):
        (tmp_path / "transactions.txt").write_text(
            _block(7) + _block(2) + _block(3), encoding="utf-8"
        )
        assert _ledger(tmp_path).next_id == 8

    def test_unparsable_trailing_fragment_ignored(self, tmp_path, caplog):
        (tmp_path / "transactions.txt").write_text(
            _block(1) + _block(2) + _block(3) + "Transaction ID: 4x\nDate & Ti",
            encoding="utf-8",
        )
        with caplog.at_level(logging.WARNING):
            ledger = _ledger(tmp_path)

        assert ledger.next_id == 4
        assert "Skipping unreadable transaction ID" in caplog.text

    def test_underscore_id_skipped_with_warning(self, tmp_path, caplog):
        (tmp_path / "transactions.txt").write_text(
            _block(1) + _block(2) + _block("1_0"), encoding="utf-8"
        )
        with caplog.at_level(logging.WARNING):
            ledger = _ledger(tmp_path)

        assert ledger.next_id == 3
        assert "1_0" in caplog.text

    def test_backup_only_record_still_advances_counter(self, tmp_path):
        (tmp_path / "transactions.txt").write_text(_block(1), encoding="utf-8")
        (tmp_path / "transactions_backup.txt").write_text(
            _block(1) + _block(2), encoding="utf-8"
        )
        assert _ledger(tmp_path).next_id == 3


class TestParseTransactionId:

    def test_other_lines_are_ignored(self):
        assert parse_transaction_id("Cashier: karl\n") is None

    def test_trailing_integer(self):
        assert parse_transaction_id("Transaction ID: 42\n") == 42

    @pytest.mark.parametrize("line", [
        "Transaction ID: 1_0\n",
        "Transaction ID: +3\n",
        "Transaction ID: 0\n",
    ])
    def test_non_canonical_ids_rejected(self, line):
        with pytest.raises(ValueError):
            parse_transaction_id(line)


class TestAppend:

    def test_writes_record_to_primary_and_backup(self, tmp_path):
        ledger = _ledger(tmp_path)
        order = _order()

        outcome = ledger.append("karl", order.lines, order.total, SALE_TIME)

        expected = (
            "Transaction ID: 1\n"
            "Date & Time: 2024-06-01 09:30:05\n"
            "Cashier: karl\n"
            "Items Purchased:\n"
            "  - Tapsilog x2 (Java Rice) - $184.00\n"
            "  - Hungariansilog x1 (None) - $95.00\n"
            "Total Amount: $279.00\n"
            "=============================================\n"
        )
        assert outcome.fully_persisted
        assert outcome.record.id == 1
        assert (tmp_path / "transactions.txt").read_text(encoding="utf-8") == expected
        assert (tmp_path / "transactions_backup.txt").read_text(encoding="utf-8") == expected

    def test_appends_never_overwrite(self, tmp_path):
        (tmp_path / "transactions.txt").write_text(_block(1), encoding="utf-8")
        ledger = _ledger(tmp_path)
        order = _order()

        ledger.append("karl", order.lines, order.total, SALE_TIME)
        ledger.append("karl", order.lines, order.total, SALE_TIME)

        text = (tmp_path / "transactions.txt").read_text(encoding="utf-8")
        assert text.startswith(_block(1))
        assert "Transaction ID: 2\n" in text
        assert "Transaction ID: 3\n" in text
        assert ledger.next_id == 4

    def test_new_ledger_continues_where_previous_run_stopped(self, tmp_path):
        order = _order()
        _ledger(tmp_path).append("karl", order.lines, order.total, SALE_TIME)
        _ledger(tmp_path).append("karl", order.lines, order.total, SALE_TIME)

        assert _ledger(tmp_path).next_id == 3

    def test_backup_failure_keeps_primary_write(self, tmp_path, caplog):
        # A directory where the backup file should be makes its open() fail.
        (tmp_path / "transactions_backup.txt").mkdir()
        ledger = _ledger(tmp_path)
        order = _order()

        with caplog.at_level(logging.ERROR):
            outcome = ledger.append("karl", order.lines, order.total, SALE_TIME)

        assert not outcome.fully_persisted
        assert len(outcome.failures) == 1
        assert "backup" in str(outcome.failures[0])
        assert "Transaction ID: 1" in (tmp_path / "transactions.txt").read_text(encoding="utf-8")
        assert "Problem writing transaction 1" in caplog.text

    def test_primary_failure_still_writes_backup_and_consumes_id(self, tmp_path):
        (tmp_path / "transactions.txt").mkdir()
        ledger = _ledger(tmp_path)
        order = _order()

        outcome = ledger.append("karl", order.lines, order.total, SALE_TIME)

        assert len(outcome.failures) == 1
        assert "primary" in str(outcome.failures[0])
        assert "Transaction ID: 1" in (tmp_path / "transactions_backup.txt").read_text(
            encoding="utf-8"
        )
        assert ledger.next_id == 2

    def test_creates_missing_data_directory(self, tmp_path):
        ledger = TextFileLedger(tmp_path / "data" / "t.txt", tmp_path / "data" / "b.txt")
        order = _order()
        ledger.append("karl", order.lines, order.total, SALE_TIME)
        assert (tmp_path / "data" / "t.txt").exists()


class TestReadBlocks:

    def test_splits_records_and_keeps_trailing_fragment(self, tmp_path):
        (tmp_path / "transactions.txt").write_text(
            _block(1) + _block(2) + "Transaction ID: 3\n", encoding="utf-8"
        )
        blocks = _ledger(tmp_path).read_blocks()

        assert len(blocks) == 3
        assert blocks[0].startswith("Transaction ID: 1")
        assert blocks[1].endswith("=" * 45)
        assert blocks[2] == "Transaction ID: 3"

    def test_absent_log(self, tmp_path):
        assert _ledger(tmp_path).read_blocks() == []
