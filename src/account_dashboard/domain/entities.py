"""
Core Domain Entities.

This module defines the records shown by the dashboard's list screens.
Records are immutable; adapters project them into item view models and
never write them back.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Friend(BaseModel):
    """A contact the user can send money to."""

    id: UUID = Field(default_factory=uuid4, description="Stable identifier")
    name: str = Field(..., description="Display name")
    phone: str = Field(..., description="Phone number as entered")

    model_config = {"frozen": True}


class Card(BaseModel):
    """A payment card linked to the account."""

    id: UUID = Field(default_factory=uuid4, description="Stable identifier")
    number: str = Field(..., description="Masked card number")
    holder: str = Field(..., description="Name printed on the card")

    model_config = {"frozen": True}


class Transfer(BaseModel):
    """A money transfer, either sent or received by the user."""

    id: UUID = Field(default_factory=uuid4, description="Stable identifier")
    description: str = Field(..., description="Free-text transfer note")
    amount: Decimal = Field(..., ge=0, description="Transferred amount")
    currency_code: str = Field(..., min_length=3, max_length=3)
    sender: str = Field(..., description="Sender display name")
    recipient: str = Field(..., description="Recipient display name")
    is_sender: bool = Field(..., description="True if the user sent it")
    date: datetime = Field(..., description="When the transfer happened")

    model_config = {"frozen": True}


class User(BaseModel):
    """The signed-in identity. Premium users get cached fallbacks."""

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(default="")
    is_premium: bool = Field(default=False)

    model_config = {"frozen": True}
