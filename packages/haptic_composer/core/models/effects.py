"""Common haptic effect parameters.

Named intensity, duration and sharpness levels for building patterns
without magic numbers.
"""

# Intensity levels
INTENSITY_LIGHT = 0.1
INTENSITY_MEDIUM = 0.5
INTENSITY_STRONG = 0.8
INTENSITY_MAX = 1.0

# Durations (milliseconds)
DURATION_SHORT_MS = 20
DURATION_MEDIUM_MS = 50
DURATION_LONG_MS = 100

# Sharpness levels (honoured by sinks that support it)
SHARPNESS_LOW = 0.0
SHARPNESS_MEDIUM = 0.5
SHARPNESS_HIGH = 1.0

# Event duration bounds enforced at construction
MIN_EVENT_DURATION_MS = 1
MAX_EVENT_DURATION_MS = 30_000
