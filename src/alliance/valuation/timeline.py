"""Month-by-month value and investment curve.

Three accrual shapes, each scaled by the duration:
  - direct value:     sin(p * pi) hump peaking mid-partnership
  - indirect value:   p ** 1.5, builds gradually
  - long-term value:  p ** 2, back-loaded

where p = month / duration.  The monthly values are a reporting shape and
do not sum back to the component totals.
"""

from __future__ import annotations

import logging

import numpy as np

from src.alliance.errors import InvalidInput
from src.alliance.models import ValueTimeline

logger = logging.getLogger(__name__)


def compute_value_timeline(
    investment: float,
    direct_value: float,
    indirect_value: float,
    long_term_value: float,
    duration_months: int,
) -> ValueTimeline:
    if duration_months < 1:
        raise InvalidInput(f"duration_months must be positive, got {duration_months}")

    months = np.arange(1, duration_months + 1)
    progress = months / duration_months

    direct = direct_value * np.sin(progress * np.pi) / (duration_months / 2)
    indirect = indirect_value * progress ** 1.5 / duration_months
    long_term = long_term_value * progress ** 2 / duration_months
    value = direct + indirect + long_term

    investment_by_month = np.full(duration_months, investment / duration_months)

    logger.debug(
        "Value timeline over %d months: peak=%.2f at month %d",
        duration_months, float(value.max()), int(months[value.argmax()]),
    )
    return ValueTimeline(
        month_labels=[f"Month {m}" for m in months],
        investment_by_month=investment_by_month.tolist(),
        value_by_month=value.tolist(),
    )
