from sales_purchase.routers.health import router as health_router
from sales_purchase.routers.purchases import router as purchases_router
from sales_purchase.routers.sales import router as sales_router

__all__ = [
    "health_router",
    "purchases_router",
    "sales_router",
]
