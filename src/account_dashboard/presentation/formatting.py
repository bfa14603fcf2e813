"""
Display Formatting for Transfer Items.

Fixed en-US formatting of amounts and dates. Locale-aware formatting is
a presentation collaborator concern; these helpers only need to be
deterministic.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Dict

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "GBP": "£",
    "EUR": "€",
    "JPY": "¥",
    "BRL": "R$",
}

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_amount(amount: Decimal, currency_code: str) -> str:
    """Format an amount as "<symbol> <grouped amount with 2 decimals>"."""
    symbol = CURRENCY_SYMBOLS.get(currency_code.upper(), currency_code.upper())
    return f"{symbol} {Decimal(amount):,.2f}"


def format_time(value: datetime) -> str:
    """12-hour clock, e.g. "9:41 AM"."""
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {period}"


def format_long_date(value: datetime) -> str:
    """E.g. "June 29, 2007 at 9:41 AM"."""
    month = MONTH_NAMES[value.month - 1]
    return f"{month} {value.day}, {value.year} at {format_time(value)}"


def format_short_date(value: datetime) -> str:
    """E.g. "6/29/07, 9:41 AM"."""
    return f"{value.month}/{value.day}/{value.year % 100:02d}, {format_time(value)}"
