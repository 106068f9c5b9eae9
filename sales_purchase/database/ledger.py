import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sales_purchase.core.constants import LEDGER_BACKENDS
from sales_purchase.core.pricing import SaleQuote
from sales_purchase.models.purchase import Purchase
from sales_purchase.models.sale import Sale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaleEntry:
    seller_id: int
    customer_id: int
    product_id: int
    quantity: int
    available_quantity: int
    quote: SaleQuote


@dataclass(frozen=True)
class PurchaseEntry:
    seller_id: int
    product_id: int
    quantity: int


@dataclass(frozen=True)
class LedgerResult:
    ok: bool
    message: Optional[str] = None
    record_id: Optional[int] = None

    @classmethod
    def success(cls, record_id=None):
        return cls(ok=True, record_id=record_id)

    @classmethod
    def failure(cls, message):
        return cls(ok=False, message=message)


class StockLedger(ABC):
    """Applies a sale or a purchase to stock and records it atomically.

    Implementations report business failures through :class:`LedgerResult`
    instead of raising.
    """

    @abstractmethod
    def apply_sale(self, entry: SaleEntry) -> LedgerResult:
        raise NotImplementedError

    @abstractmethod
    def apply_purchase(self, entry: PurchaseEntry) -> LedgerResult:
        raise NotImplementedError


class ProcedureStockLedger(StockLedger):
    """Delegates to the ``insert_new_sale`` and ``create_purchase`` procedures."""

    def __init__(self, db: Session):
        self.db = db
        self.dialect = db.get_bind().dialect.name

    def _call_insert_new_sale(self, params):
        if self.dialect == "mysql":
            # noinspection SqlNoDataSourceInspection
            self.db.execute(
                text(
                    "CALL insert_new_sale(:p_seller_id, :p_customer_id, :p_product_id, "
                    ":p_requested_quantity, @p_error_message)"
                ),
                params,
            )
            # noinspection SqlNoDataSourceInspection
            return self.db.execute(text("SELECT @p_error_message")).scalar()
        # noinspection SqlNoDataSourceInspection
        row = self.db.execute(
            text(
                "CALL insert_new_sale(:p_seller_id, :p_customer_id, :p_product_id, "
                ":p_requested_quantity, NULL)"
            ),
            params,
        ).first()
        return row[0] if row else None

    def apply_sale(self, entry):
        params = {
            "p_seller_id": entry.seller_id,
            "p_customer_id": entry.customer_id,
            "p_product_id": entry.product_id,
            "p_requested_quantity": entry.quantity,
        }
        try:
            error_message = self._call_insert_new_sale(params)
            if error_message:
                self.db.rollback()
                return LedgerResult.failure(str(error_message))
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            logger.warning("insert_new_sale failed for product %s: %s", entry.product_id, exc)
            return LedgerResult.failure(str(getattr(exc, "orig", None) or exc))
        return LedgerResult.success()

    def apply_purchase(self, entry):
        params = {
            "p_seller_id": entry.seller_id,
            "p_product_id": entry.product_id,
            "p_quantity": entry.quantity,
        }
        try:
            # noinspection SqlNoDataSourceInspection
            self.db.execute(
                text("CALL create_purchase(:p_seller_id, :p_product_id, :p_quantity)"),
                params,
            )
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            logger.warning("create_purchase failed for product %s: %s", entry.product_id, exc)
            return LedgerResult.failure(str(getattr(exc, "orig", None) or exc))
        return LedgerResult.success()


class TableStockLedger(StockLedger):
    """Writes the Sales/Purchases rows directly, for databases without the procedures."""

    def __init__(self, db: Session):
        self.db = db

    def apply_sale(self, entry):
        if entry.quantity <= 0:
            return LedgerResult.failure("Invalid quantity requested: {}".format(entry.quantity))
        if entry.quantity > entry.available_quantity:
            return LedgerResult.failure(
                "Insufficient stock available for product ID {}.\n"
                "Available quantity: {}, Requested quantity: {}".format(
                    entry.product_id, entry.available_quantity, entry.quantity
                )
            )

        quote = entry.quote
        sale = Sale(
            product_id=entry.product_id,
            user_id=entry.customer_id,
            quantity=entry.quantity,
            unit_price=quote.unit_price,
            cgst=quote.cgst,
            sgst=quote.sgst,
            igst=quote.igst,
            net_amount=quote.net_amount,
            gross_amount=quote.gross_amount,
        )
        try:
            self.db.add(sale)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            logger.warning("Sale insert failed for product %s: %s", entry.product_id, exc)
            return LedgerResult.failure(str(exc))
        return LedgerResult.success(sale.id)

    def apply_purchase(self, entry):
        if entry.quantity <= 0:
            return LedgerResult.failure("Invalid quantity requested: {}".format(entry.quantity))

        purchase = Purchase(
            seller_id=entry.seller_id,
            product_id=entry.product_id,
            quantity=entry.quantity,
        )
        try:
            self.db.add(purchase)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            logger.warning("Purchase insert failed for product %s: %s", entry.product_id, exc)
            return LedgerResult.failure(str(exc))
        return LedgerResult.success(purchase.id)


def build_stock_ledger(db: Session, backend: str = "auto") -> StockLedger:
    backend = (backend or "auto").strip().lower()
    if backend not in LEDGER_BACKENDS:
        raise ValueError(
            "STOCK_LEDGER_BACKEND must be one of {}, got {!r}".format(", ".join(LEDGER_BACKENDS), backend)
        )
    if backend == "auto":
        backend = "table" if db.get_bind().dialect.name == "sqlite" else "procedure"
    if backend == "table":
        return TableStockLedger(db)
    return ProcedureStockLedger(db)


__all__ = [
    "LedgerResult",
    "ProcedureStockLedger",
    "PurchaseEntry",
    "SaleEntry",
    "StockLedger",
    "TableStockLedger",
    "build_stock_ledger",
]
