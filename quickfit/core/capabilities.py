"""
Capability string constants for quickfit.

Import from here, never use raw strings.

Usage:
    from quickfit.core.capabilities import CAPABILITY_MATERIALIZED

    if sample.supports(CAPABILITY_MATERIALIZED):
        x, y = sample.x, sample.y
"""

# Data can be returned as full numpy arrays in memory
CAPABILITY_MATERIALIZED = 'materialized'

# Data can be iterated multiple times (shuffled epochs, predictions)
CAPABILITY_REPEATABLE = 'repeatable'

# Data has been rescaled into [0, 1]
CAPABILITY_NORMALIZED = 'normalized'

ALL_CAPABILITIES = frozenset({
    CAPABILITY_MATERIALIZED,
    CAPABILITY_REPEATABLE,
    CAPABILITY_NORMALIZED,
})

__all__ = [
    'CAPABILITY_MATERIALIZED',
    'CAPABILITY_REPEATABLE',
    'CAPABILITY_NORMALIZED',
    'ALL_CAPABILITIES',
]
