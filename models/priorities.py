"""Named priority bands for recommendation and alert ladders.

Higher numbers are more urgent. Each ladder is kept separate so it can be
audited and tested on its own; the same number appearing in two ladders does
not tie them together.
"""

from typing import Final

# Prioritized checks: safety overrides (150-200)
SAFETY_CRITICAL_ALERT: Final = 200
SAFETY_STORM: Final = 190
SAFETY_SEVERE_FROST: Final = 180
SAFETY_FROST: Final = 150

# Prioritized checks: contextual bands
RAIN_CERTAIN: Final = 140
RAIN_LIKELY: Final = 100
RAIN_UNLIKELY: Final = 40

UV_VERY_HIGH: Final = 130
UV_HIGH: Final = 110
UV_MODERATE: Final = 60
UV_LOW: Final = 20

SLEEP_NIGHT: Final = 120
SLEEP_DAY: Final = 30

JACKET_HEAVY: Final = 90
JACKET_WARM: Final = 70
JACKET_DEFAULT: Final = 50

WIND_ADVISORY: Final = 70

AQI_VERY_POOR: Final = 100
AQI_POOR: Final = 60

# Quick checks: the simpler ladder
QUICK_RAIN_CERTAIN: Final = 100
QUICK_RAIN_LIKELY: Final = 80
QUICK_RAIN_UNLIKELY: Final = 20

QUICK_UV_VERY_HIGH: Final = 100
QUICK_UV_HIGH: Final = 85
QUICK_UV_MODERATE: Final = 60
QUICK_UV_LOW: Final = 15
QUICK_UV_NIGHT: Final = 5

QUICK_JACKET_HEAVY: Final = 90
QUICK_JACKET_WARM: Final = 70
QUICK_JACKET_LIGHT: Final = 55
QUICK_JACKET_NONE: Final = 20

# (night, day) per sleep band
QUICK_SLEEP_VERY_GOOD: Final = (70, 25)
QUICK_SLEEP_GOOD: Final = (65, 30)
QUICK_SLEEP_LIMITED: Final = (85, 40)

QUICK_WIND_STORM: Final = 95
QUICK_WIND_GUSTY: Final = 70

# Safety alerts
ALERT_HEAT_EXTREME: Final = 100
ALERT_HEAT_HIGH: Final = 75
ALERT_COLD_EXTREME: Final = 100
ALERT_FROST: Final = 70
ALERT_UV_EXTREME: Final = 95
ALERT_UV_VERY_HIGH: Final = 80
ALERT_STORM_SEVERE: Final = 100
ALERT_STORM: Final = 85
ALERT_AQI_CRITICAL: Final = 90
ALERT_AQI_POOR: Final = 65
ALERT_HEADACHE_SENSITIVE: Final = 80
ALERT_HEADACHE: Final = 40

# 24h forecast recommendations
FORECAST_BEST_TIME: Final = 100
FORECAST_CAPPED_HOURS: Final = 90
FORECAST_UV: Final = 75
