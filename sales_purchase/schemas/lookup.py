from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RemoteUser(BaseModel):
    id: int = Field(validation_alias=AliasChoices("userId", "user_id", "id"))
    name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("name", "userName", "user_name", "username"),
    )
    email: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RemoteProduct(BaseModel):
    id: int = Field(validation_alias=AliasChoices("productId", "product_id", "id"))
    name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("name", "productName", "product_name"),
    )
    price: Optional[Decimal] = Field(
        default=None,
        validation_alias=AliasChoices("price", "unitPrice", "unit_price"),
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RemoteStock(BaseModel):
    product_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("productId", "product_id"),
    )
    available_quantity: int = Field(
        default=0,
        validation_alias=AliasChoices("availableQuantity", "available_quantity", "quantity"),
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
