from sales_purchase.models.purchase import Purchase
from sales_purchase.models.sale import Sale

__all__ = ["Purchase", "Sale"]
