from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, constr


class CartItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(alias="itemId")


class CartLineRequest(CartItemRequest):
    # Range is checked by the cart service so every path reports it the same way
    quantity: Optional[int] = None


class ShippingAddress(BaseModel):
    address: constr(strip_whitespace=True, min_length=1, max_length=255)
    city: constr(strip_whitespace=True, min_length=1, max_length=100)


class CheckoutRequest(BaseModel):
    shipping_address: ShippingAddress = Field(
        validation_alias=AliasChoices("shippingAddress", "ShippingAddress", "shipping_address")
    )
