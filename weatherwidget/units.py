"""Unit conversions used by the current-conditions panel."""

import math

MMHG_PER_HPA = 0.75006


def js_round(x: float) -> int:
    """Round half toward +inf, matching how the widget has always displayed temperatures."""
    return math.floor(x + 0.5)


def hpa_to_mmhg(hpa: float) -> int:
    return js_round(hpa * MMHG_PER_HPA)


def m_to_km(m: float) -> str:
    """Metres to whole kilometres, formatted for display."""
    return str(js_round(m / 1000))
