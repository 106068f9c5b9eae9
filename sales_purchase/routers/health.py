from datetime import datetime, timezone

from fastapi import APIRouter

from sales_purchase.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check():
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "time": datetime.now(timezone.utc).isoformat(),
        "lookups": {
            "users": settings.USER_SERVICE_URL,
            "products": settings.PRODUCT_SERVICE_URL,
            "stocks": settings.STOCK_SERVICE_URL,
        },
    }
