from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SaleRead(BaseModel):
    id: int
    product_id: int
    user_id: int
    quantity: int
    unit_price: float
    cgst: float
    sgst: float
    igst: float
    net_amount: float
    gross_amount: float
    sale_date: datetime

    model_config = ConfigDict(from_attributes=True)
