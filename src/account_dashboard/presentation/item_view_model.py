"""
Item View Model - Display Projection of a Record.

Items are resource-agnostic: two display fields and a selection action.
The action closes over the record it was built from, so reordering
between loads can never make a row select the wrong record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from account_dashboard.domain.entities import Card, Friend, Transfer
from account_dashboard.presentation.formatting import (
    format_amount,
    format_long_date,
    format_short_date,
)


@dataclass(frozen=True)
class ItemViewModel:
    """A row of a list screen."""

    title: str
    subtitle: str
    select: Callable[[], None]

    @classmethod
    def for_friend(
        cls, friend: Friend, selection: Callable[[], None]
    ) -> "ItemViewModel":
        return cls(title=friend.name, subtitle=friend.phone, select=selection)

    @classmethod
    def for_card(cls, card: Card, selection: Callable[[], None]) -> "ItemViewModel":
        return cls(title=card.number, subtitle=card.holder, select=selection)

    @classmethod
    def for_transfer(
        cls,
        transfer: Transfer,
        long_date_style: bool,
        selection: Callable[[], None],
    ) -> "ItemViewModel":
        """
        Build a transfer row.

        Sent transfers name the recipient, received ones the sender.

        Args:
            transfer: Record to project
            long_date_style: "April 1, 1976 at 12:00 AM" if True,
                "4/1/76, 12:00 AM" otherwise
            selection: Action bound to this record
        """
        amount = format_amount(transfer.amount, transfer.currency_code)
        date = (
            format_long_date(transfer.date)
            if long_date_style
            else format_short_date(transfer.date)
        )
        if transfer.is_sender:
            subtitle = f"Sent to: {transfer.recipient} on {date}"
        else:
            subtitle = f"Received from: {transfer.sender} on {date}"

        return cls(
            title=f"{amount} • {transfer.description}",
            subtitle=subtitle,
            select=selection,
        )
