import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from fastapi.responses import PlainTextResponse

from sales_purchase.core.constants import INT_MAX, INT_MIN, SALES_PREFIX
from sales_purchase.core.exceptions import NotFoundError
from sales_purchase.dependencies import get_sale_service
from sales_purchase.schemas.sale import SaleRead
from sales_purchase.services.sale_service import SaleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=SALES_PREFIX, tags=["Sales"])


@router.post("/add", status_code=200, response_class=PlainTextResponse)
def create_sale(
    customer_id: int = Query(..., alias="customerId", ge=INT_MIN, le=INT_MAX),
    product_id: int = Query(..., alias="productId", ge=INT_MIN, le=INT_MAX),
    requested_quantity: int = Query(..., alias="requestedQuantity", ge=INT_MIN, le=INT_MAX),
    service: SaleService = Depends(get_sale_service),
):
    try:
        service.create_sale(customer_id, product_id, requested_quantity)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to create sale for customer %s", customer_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return "Sale created successfully."


@router.get("/get-by-id/{sale_id}", response_model=SaleRead)
def get_sale_by_id(
    sale_id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: SaleService = Depends(get_sale_service),
):
    try:
        return service.get_sale_by_id(sale_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to retrieve sale %s", sale_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/get-all", response_model=list[SaleRead])
def get_all_sales(service: SaleService = Depends(get_sale_service)):
    try:
        sales = service.get_all_sales()
    except Exception as exc:
        logger.exception("Failed to retrieve all sales")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    if not sales:
        raise HTTPException(status_code=404, detail="No sales found.")
    return sales


@router.delete("/delete/{sale_id}", response_class=PlainTextResponse)
def delete_sale_by_id(
    sale_id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: SaleService = Depends(get_sale_service),
):
    try:
        service.delete_sale_by_id(sale_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete sale %s", sale_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return "Sale deleted successfully with ID: {}".format(sale_id)


@router.get("/get-by-user/{user_id}", response_model=list[SaleRead])
def get_sales_by_user_id(
    user_id: int = Path(..., ge=INT_MIN, le=INT_MAX),
    service: SaleService = Depends(get_sale_service),
):
    try:
        sales = service.get_sales_by_user_id(user_id)
    except Exception as exc:
        logger.exception("Failed to retrieve sales for customer %s", user_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    if not sales:
        raise HTTPException(
            status_code=404,
            detail="No sales found for customer with ID: {}".format(user_id),
        )
    return sales


__all__ = ["router"]
