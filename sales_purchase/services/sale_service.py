import logging
from typing import cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from sales_purchase.core.exceptions import NotFoundError
from sales_purchase.core.pricing import TaxRates, quote_sale
from sales_purchase.database.ledger import LedgerResult, SaleEntry, StockLedger
from sales_purchase.models.sale import Sale
from sales_purchase.services.lookup_service import EntityLookup

logger = logging.getLogger(__name__)


class SaleService:
    def __init__(
        self,
        db: Session,
        *,
        lookup: EntityLookup,
        ledger: StockLedger,
        seller_id: int,
        tax_rates: TaxRates,
    ):
        self.db = db
        self.lookup = lookup
        self.ledger = ledger
        self.seller_id = seller_id
        self.tax_rates = tax_rates

    def create_sale(self, customer_id: int, product_id: int, requested_quantity: int) -> LedgerResult:
        """Validate the customer, product and stock, then record the sale.

        Raises NotFoundError when any referenced entity is missing and
        ValueError when the quantity is invalid or the ledger rejects the sale.
        """
        customer = self.lookup.get_user(customer_id)
        if customer is None:
            raise NotFoundError("Customer not found with id: {}".format(customer_id))

        product = self.lookup.get_product(product_id)
        if product is None:
            raise NotFoundError("Product not found with id: {}".format(product_id))

        stock = self.lookup.get_stock(product_id)
        if stock is None:
            raise NotFoundError("Stock not found with product id: {}".format(product_id))

        if requested_quantity <= 0:
            raise ValueError("Invalid quantity requested: {}".format(requested_quantity))

        available_quantity = stock.available_quantity
        entry = SaleEntry(
            seller_id=self.seller_id,
            customer_id=customer_id,
            product_id=product_id,
            quantity=requested_quantity,
            available_quantity=available_quantity,
            quote=quote_sale(product.price, requested_quantity, self.tax_rates),
        )
        result = self.ledger.apply_sale(entry)
        if not result.ok:
            raise ValueError(
                result.message
                or "Insufficient stock available for product ID {}.\n"
                "Available quantity: {}, Requested quantity: {}".format(
                    product_id, available_quantity, requested_quantity
                )
            )

        logger.info(
            "Sale recorded: customer=%s product=%s quantity=%s id=%s",
            customer_id,
            product_id,
            requested_quantity,
            result.record_id,
        )
        return result

    def get_sale_by_id(self, sale_id: int) -> Sale:
        sale = self.db.get(Sale, sale_id)
        if sale is None:
            raise NotFoundError("Sale not found with ID: {}".format(sale_id))
        return sale

    def get_all_sales(self) -> list[Sale]:
        sales = self.db.execute(select(Sale).order_by(Sale.id)).scalars().all()
        return cast(list[Sale], list(sales))

    def delete_sale_by_id(self, sale_id: int) -> bool:
        sale = self.get_sale_by_id(sale_id)
        self.db.delete(sale)
        self.db.commit()
        logger.info("Sale deleted: id=%s", sale_id)
        return True

    def get_sales_by_user_id(self, user_id: int) -> list[Sale]:
        sales = (
            self.db.execute(select(Sale).where(Sale.user_id == user_id).order_by(Sale.id))
            .scalars()
            .all()
        )
        return cast(list[Sale], list(sales))


__all__ = ["SaleService"]
