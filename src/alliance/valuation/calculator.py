"""ROI calculator — turns partnership inputs into a full valuation report."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from src.alliance.config import ValuationTables, settings
from src.alliance.errors import InvalidInput
from src.alliance.models import ArchivedROIResult, ROIInput, ROIResult
from src.alliance.valuation.components import (
    compute_direct_value,
    compute_indirect_value,
    compute_long_term_value,
    roi_percent,
)
from src.alliance.valuation.timeline import compute_value_timeline

logger = logging.getLogger(__name__)


def parse_roi_input(data: dict[str, Any]) -> ROIInput:
    """Validate a raw mapping into an ROIInput, raising InvalidInput on failure."""
    try:
        return ROIInput.model_validate(data)
    except ValidationError as exc:
        raise InvalidInput(str(exc)) from exc


def calculate_roi(
    roi_input: ROIInput, tables: ValuationTables | None = None,
) -> ROIResult:
    tables = tables or settings.valuation_tables
    investment = roi_input.investment
    duration = roi_input.duration_months
    d = roi_input.direct

    direct_value = compute_direct_value(
        d.brand_exposure_value, d.lead_count, d.lead_value,
        d.conversion_count, d.conversion_value,
    )
    indirect_value = compute_indirect_value(
        investment,
        roi_input.brand_perception_level,
        roi_input.audience_engagement_level,
        tables,
    )
    long_term_value = compute_long_term_value(
        investment,
        duration,
        roi_input.relationship_value_level,
        roi_input.innovation_potential_level,
        tables,
    )
    total_value = direct_value + indirect_value + long_term_value
    roi = roi_percent(total_value, investment)
    timeline = compute_value_timeline(
        investment, direct_value, indirect_value, long_term_value, duration,
    )

    logger.info(
        "ROI for %r: investment=%.2f total=%.2f (direct=%.2f indirect=%.2f "
        "long_term=%.2f) roi=%.1f%%",
        roi_input.partnership_name, investment, total_value,
        direct_value, indirect_value, long_term_value, roi,
    )
    return ROIResult(
        partnership_name=roi_input.partnership_name,
        investment=investment,
        duration_months=duration,
        direct_value=direct_value,
        indirect_value=indirect_value,
        long_term_value=long_term_value,
        total_value=total_value,
        roi_percent=roi,
        value_timeline=timeline,
    )


def archive_result(
    result: ROIResult, *, now: datetime | None = None,
) -> ArchivedROIResult:
    """Stamp a result with a generated id and computation time for archival."""
    return ArchivedROIResult(
        **result.model_dump(),
        id=uuid.uuid4().hex,
        computed_at=now or datetime.now(timezone.utc),
    )
