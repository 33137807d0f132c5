"""Analytics Math: pure helpers behind the dashboard summary.

Invariants:
    - No IO: callers pass in counts already read from the store
    - conversion rate is 0 whenever there are no visitors, regardless of contacts
    - rate is a percentage rounded half-up to 2 decimals
"""

import math

TOP_PAGES_LIMIT = 5
RECENT_SUBMISSIONS_LIMIT = 5


def compute_conversion_rate(contact_forms: int, total_visitors: int) -> float:
    """Contact submissions per hundred visitors."""
    if total_visitors <= 0:
        return 0
    # round() is banker's rounding; dashboards expect half-up
    return math.floor(contact_forms / total_visitors * 100 * 100 + 0.5) / 100
