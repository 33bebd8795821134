from __future__ import annotations

import calendar
from datetime import date

# Extension granted on top of the passport warranty when a device is
# registered to a named owner.
OWNER_BONUS_MONTHS = 12


def add_months(start: date, months: int) -> date:
    """Move ``start`` forward by whole calendar months.

    The day is clamped to the last day of the target month, so
    2024-01-31 + 1 month is 2024-02-29.
    """

    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def warranty_bonus_months(owner: object | None) -> int:
    """Business rule: named owners get the bonus, anonymous devices do not."""
    return OWNER_BONUS_MONTHS if owner is not None else 0


def compute_warranty_expiration(purchase_date: date, warranty_months: int, owner: object | None) -> date:
    """Return the expiration date for a device bought on ``purchase_date``."""
    return add_months(purchase_date, (warranty_months or 0) + warranty_bonus_months(owner))
