"""Utility functions, constants and exceptions."""

from .constants import (
    MIN_SLOTS, MIN_POLES, MIN_PHASES,
    THREE_PHASE, PHASE_SHIFT_DEG, THREE_PHASE_LABELS,
    REFERENCE_PHASE, SIGNATURE_LENGTH,
    WindingRanges,
    PHASE_COLORS,
    phase_labels
)
from .errors import (
    WindingLayoutError,
    InvalidConfiguration
)

__all__ = [
    'MIN_SLOTS', 'MIN_POLES', 'MIN_PHASES',
    'THREE_PHASE', 'PHASE_SHIFT_DEG', 'THREE_PHASE_LABELS',
    'REFERENCE_PHASE', 'SIGNATURE_LENGTH',
    'WindingRanges',
    'PHASE_COLORS',
    'phase_labels',
    'WindingLayoutError',
    'InvalidConfiguration'
]
