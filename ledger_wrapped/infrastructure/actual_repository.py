"""SQLAlchemy-backed repository reading an Actual Budget ledger file."""

from datetime import date
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ledger_wrapped.application.ports.database import DatabaseEnginePort
from ledger_wrapped.application.ports.ledger_records import LedgerRecordsPort
from ledger_wrapped.domain.constants import DEFAULT_CURRENCY_SYMBOL
from ledger_wrapped.domain.errors import DatabaseError
from ledger_wrapped.domain.models import (
    Account,
    BudgetEntry,
    Category,
    Payee,
    Transaction,
)
from ledger_wrapped.domain.services.normalization import (
    coerce_account,
    coerce_category,
    coerce_payee,
    coerce_transaction,
)
from ledger_wrapped.utils.decimal_utils import to_major_units

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "NZD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "CHF": "CHF",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "PLN": "zł",
    "BRL": "R$",
    "MXN": "$",
}


def _date_key(value: date) -> int:
    return value.year * 10000 + value.month * 100 + value.day


class SqlAlchemyActualRepository(LedgerRecordsPort):
    """Repository backed by SQLAlchemy for Actual Budget ledger tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Transaction]:
        query = self._build_transactions_query(start_date, end_date)
        params: dict[str, int] = {}
        if start_date:
            params["start_date"] = _date_key(start_date)
        if end_date:
            params["end_date"] = _date_key(end_date)
        rows = self._fetch_all(query, params)

        category_map = self._fetch_mapping("category_mapping", "transferId")
        payee_map = self._fetch_mapping("payee_mapping", "targetId")
        categories = {item.id: item for item in self.fetch_categories()}
        payees = {item.id: item for item in self.fetch_payees()}

        transactions: list[Transaction] = []
        for row in rows:
            record = dict(row)
            category_id = record.get("category")
            if category_id:
                category_id = category_map.get(category_id, category_id)
                record["category"] = category_id
                category = categories.get(category_id)
                if category:
                    record["category_name"] = category.name
                    record["category_tombstone"] = category.tombstone
            payee_id = record.get("payee")
            if payee_id:
                payee_id = payee_map.get(payee_id, payee_id)
                record["payee"] = payee_id
                payee = payees.get(payee_id)
                if payee:
                    record["payee_name"] = payee.name
                    record["payee_tombstone"] = payee.tombstone
            transaction = coerce_transaction(record)
            if transaction is not None:
                transactions.append(transaction)
        return transactions

    def fetch_categories(self) -> list[Category]:
        query = text(
            """
            SELECT c.id AS id,
                   c.name AS name,
                   c.is_income AS is_income,
                   c.tombstone AS tombstone,
                   g.name AS group_name
            FROM categories c
            LEFT JOIN category_groups g ON g.id = c.cat_group
            """
        )
        return [coerce_category(row) for row in self._fetch_all(query)]

    def fetch_payees(self) -> list[Payee]:
        query = text(
            """
            SELECT id, name, tombstone, transfer_acct
            FROM payees
            """
        )
        return [coerce_payee(row) for row in self._fetch_all(query)]

    def fetch_accounts(self) -> list[Account]:
        query = text(
            """
            SELECT id, name, type, offbudget
            FROM accounts
            WHERE tombstone = 0
            """
        )
        return [coerce_account(row) for row in self._fetch_all(query)]

    def fetch_budget_entries(self, year: int) -> list[BudgetEntry]:
        query = text(
            """
            SELECT category, month, amount
            FROM zero_budgets
            WHERE month >= :start_month AND month <= :end_month
            ORDER BY month
            """
        )
        rows = self._fetch_all(
            query,
            {"start_month": year * 100 + 1, "end_month": year * 100 + 12},
        )
        category_map = self._fetch_mapping("category_mapping", "transferId")
        return [
            BudgetEntry(
                category_id=category_map.get(row["category"], row["category"]),
                month=int(row["month"]),
                budgeted_amount=to_major_units(int(row["amount"] or 0)),
            )
            for row in rows
            if row["category"]
        ]

    def fetch_category_group_sort_orders(self) -> Mapping[str, int]:
        query = text(
            """
            SELECT name, sort_order
            FROM category_groups
            WHERE tombstone = 0
            """
        )
        return {
            row["name"]: int(row["sort_order"] or 0)
            for row in self._fetch_all(query)
        }

    def fetch_category_group_tombstones(self) -> Mapping[str, bool]:
        query = text(
            """
            SELECT name, tombstone
            FROM category_groups
            """
        )
        return {
            row["name"]: bool(row["tombstone"]) for row in self._fetch_all(query)
        }

    def fetch_currency_symbol(self) -> str:
        query = text(
            """
            SELECT value
            FROM preferences
            WHERE id = 'defaultCurrencyCode'
            LIMIT 1
            """
        )
        rows = self._fetch_all(query)
        if not rows or not rows[0]["value"]:
            return DEFAULT_CURRENCY_SYMBOL
        code = str(rows[0]["value"]).strip().upper()
        return CURRENCY_SYMBOLS.get(code, code)

    def _fetch_mapping(self, table: str, target_column: str) -> dict[str, str]:
        query = text(f"SELECT id, {target_column} AS target FROM {table}")
        return {
            row["id"]: row["target"]
            for row in self._fetch_all(query)
            if row["target"]
        }

    def _fetch_all(
        self,
        query,
        params: dict[str, Any] | None = None,
    ) -> list[Mapping[str, Any]]:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                result = conn.execute(query, params or {})
                return [row._mapping for row in result.all()]
        except SQLAlchemyError as exc:
            raise DatabaseError(f"Ledger query failed: {exc}", cause=exc) from exc

    @staticmethod
    def _build_transactions_query(
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = """
        SELECT id,
               acct AS account,
               date,
               amount,
               category,
               description AS payee,
               notes,
               cleared,
               reconciled,
               parent_id,
               isParent AS is_parent
        FROM transactions
        WHERE tombstone = 0
        """
        if start_date:
            base_sql += " AND date >= :start_date"
        if end_date:
            base_sql += " AND date <= :end_date"
        base_sql += " ORDER BY date, id"
        return text(base_sql)


__all__ = ["SqlAlchemyActualRepository", "CURRENCY_SYMBOLS"]
