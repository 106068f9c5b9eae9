from fastapi import Depends
from sqlalchemy.orm import Session

from sales_purchase.config import get_settings
from sales_purchase.core.pricing import TaxRates
from sales_purchase.database.ledger import StockLedger, build_stock_ledger
from sales_purchase.database.session import get_db
from sales_purchase.services.lookup_service import EntityLookup, get_entity_lookup
from sales_purchase.services.purchase_service import PurchaseService
from sales_purchase.services.sale_service import SaleService


def get_stock_ledger(db: Session = Depends(get_db)) -> StockLedger:
    return build_stock_ledger(db, get_settings().STOCK_LEDGER_BACKEND)


def get_sale_service(
    db: Session = Depends(get_db),
    lookup: EntityLookup = Depends(get_entity_lookup),
    ledger: StockLedger = Depends(get_stock_ledger),
) -> SaleService:
    settings = get_settings()
    return SaleService(
        db,
        lookup=lookup,
        ledger=ledger,
        seller_id=settings.SELLER_ID,
        tax_rates=TaxRates.from_settings(settings),
    )


def get_purchase_service(
    db: Session = Depends(get_db),
    lookup: EntityLookup = Depends(get_entity_lookup),
    ledger: StockLedger = Depends(get_stock_ledger),
) -> PurchaseService:
    return PurchaseService(db, lookup=lookup, ledger=ledger, seller_id=get_settings().SELLER_ID)


__all__ = ["get_db", "get_purchase_service", "get_sale_service", "get_stock_ledger"]
