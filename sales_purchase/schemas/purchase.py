from pydantic import BaseModel, ConfigDict


class PurchaseRead(BaseModel):
    id: int
    seller_id: int
    product_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)
