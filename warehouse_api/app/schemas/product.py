"""
Pydantic models for product data.

Request bodies deliberately declare every field as optional: a missing
field is a business error answered with HTTP 400 by the service layer,
not a schema error.  ``ProductRead`` is the shape returned by the list
endpoint, with the domain id rendered as a string.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for creating a product.  All five fields are required by
    ``ProductService.add_product``."""

    name: Optional[str] = Field(None, examples=["Apples"])
    price: Optional[float] = Field(None, examples=[3.5])
    description: Optional[str] = Field(None, examples=["Red apples from a local orchard"])
    quantity: Optional[int] = Field(None, examples=[120])
    unit: Optional[str] = Field(None, examples=["kg"])


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    All fields are optional; empty or zero values keep the stored value.
    """

    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    unit: Optional[str] = None


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: str
    name: str
    price: float
    description: str
    quantity: int
    unit: str


class ProductFilter(BaseModel):
    """Optional criteria for listing products."""

    name: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_quantity: Optional[int] = None
    max_quantity: Optional[int] = None


class MessageResponse(BaseModel):
    message: str
