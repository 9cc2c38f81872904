"""Promo Code Schemas: create and partial update.

Invariants:
    - code is upper-cased and stripped on the way in
    - percentage discounts never exceed 100
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class _PromoCodeFields(BaseModel):

    @field_validator("code", check_fields=False)
    @classmethod
    def normalize_code(cls, v):
        if v is None:
            return v
        v = v.strip().upper()
        if not v:
            raise ValueError("code cannot be empty")
        return v

    @model_validator(mode="after")
    def check_percentage(self):
        if (
            getattr(self, "discount_type", None) == "percentage"
            and getattr(self, "discount_value", None) is not None
            and self.discount_value > 100
        ):
            raise ValueError("percentage discount cannot exceed 100")
        return self


class PromoCodeCreate(_PromoCodeFields):
    code: str = Field(min_length=1, max_length=50)
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    institution_name: str | None = None
    institution_code: str | None = None
    total_usage_limit: int | None = Field(None, ge=0)
    discount_type: Literal["percentage", "fixed_amount"]
    discount_value: Decimal = Field(gt=0)
    max_discount_amount: Decimal | None = Field(None, ge=0)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    is_active: bool = True
    notes: str | None = None


class PromoCodeUpdate(_PromoCodeFields):
    """Every field optional; only fields present in the body are written."""
    code: str | None = Field(None, max_length=50)
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    institution_name: str | None = None
    institution_code: str | None = None
    total_usage_limit: int | None = Field(None, ge=0)
    discount_type: Literal["percentage", "fixed_amount"] | None = None
    discount_value: Decimal | None = Field(None, gt=0)
    max_discount_amount: Decimal | None = Field(None, ge=0)
    valid_until: datetime | None = None
    is_active: bool | None = None
    notes: str | None = None
