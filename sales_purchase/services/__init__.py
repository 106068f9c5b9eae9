from sales_purchase.services.lookup_service import EntityLookup, HttpEntityLookup, get_entity_lookup
from sales_purchase.services.purchase_service import PurchaseService
from sales_purchase.services.sale_service import SaleService

__all__ = [
    "EntityLookup",
    "HttpEntityLookup",
    "PurchaseService",
    "SaleService",
    "get_entity_lookup",
]
