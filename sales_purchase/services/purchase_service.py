import logging
from typing import cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from sales_purchase.core.exceptions import NotFoundError
from sales_purchase.database.ledger import LedgerResult, PurchaseEntry, StockLedger
from sales_purchase.models.purchase import Purchase
from sales_purchase.services.lookup_service import EntityLookup

logger = logging.getLogger(__name__)


class PurchaseService:
    def __init__(self, db: Session, *, lookup: EntityLookup, ledger: StockLedger, seller_id: int):
        self.db = db
        self.lookup = lookup
        self.ledger = ledger
        self.seller_id = seller_id

    def create_purchase(self, product_id: int, quantity: int) -> LedgerResult:
        product = self.lookup.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found with ID: {}".format(product_id))

        if quantity <= 0:
            raise ValueError("Invalid quantity requested: {}".format(quantity))

        result = self.ledger.apply_purchase(
            PurchaseEntry(seller_id=self.seller_id, product_id=product_id, quantity=quantity)
        )
        if not result.ok:
            raise RuntimeError("Failed to create purchase: {}".format(result.message))

        logger.info(
            "Purchase recorded: product=%s quantity=%s id=%s",
            product_id,
            quantity,
            result.record_id,
        )
        return result

    def get_purchase_by_id(self, purchase_id: int) -> Purchase:
        purchase = self.db.get(Purchase, purchase_id)
        if purchase is None:
            raise NotFoundError("Purchase not found with ID: {}".format(purchase_id))
        return purchase

    def get_all_purchases(self) -> list[Purchase]:
        purchases = self.db.execute(select(Purchase).order_by(Purchase.id)).scalars().all()
        return cast(list[Purchase], list(purchases))

    def delete_purchase_by_id(self, purchase_id: int) -> bool:
        purchase = self.get_purchase_by_id(purchase_id)
        self.db.delete(purchase)
        self.db.commit()
        logger.info("Purchase deleted: id=%s", purchase_id)
        return True


__all__ = ["PurchaseService"]
