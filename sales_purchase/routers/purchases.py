import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from fastapi.responses import PlainTextResponse

from sales_purchase.core.constants import INT_MAX, INT_MIN, PURCHASES_PREFIX
from sales_purchase.core.exceptions import NotFoundError
from sales_purchase.dependencies import get_purchase_service
from sales_purchase.schemas.purchase import PurchaseRead
from sales_purchase.services.purchase_service import PurchaseService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=PURCHASES_PREFIX, tags=["Purchases"])


@router.post("/add", status_code=201, response_class=PlainTextResponse)
def create_purchase(
    product_id: int = Query(..., alias="productId", ge=INT_MIN, le=INT_MAX),
    quantity: int = Query(..., ge=INT_MIN, le=INT_MAX),
    service: PurchaseService = Depends(get_purchase_service),
):
    try:
        service.create_purchase(product_id, quantity)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to create purchase for product %s", product_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return "Purchase created successfully."


@router.get("/get-by-id/{purchase_id}", response_model=PurchaseRead)
def get_purchase_by_id(
    purchase_id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: PurchaseService = Depends(get_purchase_service),
):
    try:
        return service.get_purchase_by_id(purchase_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to retrieve purchase %s", purchase_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/get-all", response_model=list[PurchaseRead])
def get_all_purchases(service: PurchaseService = Depends(get_purchase_service)):
    try:
        purchases = service.get_all_purchases()
    except Exception as exc:
        logger.exception("Failed to retrieve all purchases")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    if not purchases:
        raise HTTPException(status_code=404, detail="No purchases found.")
    return purchases


@router.delete("/delete/{purchase_id}", response_class=PlainTextResponse)
def delete_purchase_by_id(
    purchase_id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: PurchaseService = Depends(get_purchase_service),
):
    try:
        service.delete_purchase_by_id(purchase_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete purchase %s", purchase_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return "Purchase deleted successfully with ID: {}".format(purchase_id)


__all__ = ["router"]
