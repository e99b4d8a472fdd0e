"""Testing generators – property-based strategies."""
from wallclock.testing.generators.strategies import (
    COMMON_ZONES,
    local_datetime_strategy,
    zone_strategy,
    zoned_timestamp_strategy,
)

__all__ = [
    "COMMON_ZONES",
    "local_datetime_strategy",
    "zone_strategy",
    "zoned_timestamp_strategy",
]
