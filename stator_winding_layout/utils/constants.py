"""
Constants and typical design values for double-layer stator winding layouts.
"""

import string

# =============================================================================
# INPUT LIMITS
# =============================================================================

MIN_SLOTS = 6          # Smallest stator slot count Z accepted
MIN_POLES = 2          # Smallest pole count 2p accepted
MIN_PHASES = 3         # Smallest phase count m accepted


# =============================================================================
# PHASES
# =============================================================================

THREE_PHASE = 3
PHASE_SHIFT_DEG = 120.0    # Electrical displacement between phases A, B, C
THREE_PHASE_LABELS = ('A', 'B', 'C')
REFERENCE_PHASE = 'A'      # Phase used for effective q and signature normalization
SIGNATURE_LENGTH = 3       # Distinct phases recorded in the phase pattern


def phase_labels(n_phases: int) -> tuple:
    """
    Phase labels for an m-phase winding.

    Args:
        n_phases: Number of phases m

    Returns:
        Tuple of m labels: capital letters ('A' .. 'Z'), then
        two-letter labels ('AA', 'AB', ...) past the 26th phase
    """
    return tuple(_phase_label(index) for index in range(n_phases))


def _phase_label(index: int) -> str:
    label = ''
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = string.ascii_uppercase[rem] + label
    return label


# =============================================================================
# WINDING TYPE LABELS
# =============================================================================

INTEGER_SLOT = 'Integer-slot'
FRACTIONAL_SLOT = 'Fractional-slot'
FULL_PITCH = 'Full-pitch'
SHORT_PITCH = 'Short-pitch'

STRATEGY_INTEGER_SLOT = 'integer-slot'        # Exact 120° placement
STRATEGY_FRACTIONAL_SLOT = 'fractional-slot'  # Round-robin cursor placement


# =============================================================================
# TYPICAL FACTOR RANGES (for reporting)
# =============================================================================

class WindingRanges:
    """Typical ranges for winding factors of distributed windings."""

    # Distribution factor K_d of a good distributed winding
    KD_TYPICAL_MIN = 0.90
    KD_TYPICAL_MAX = 0.97

    # Practical designs target K_w above this value
    KW_PRACTICAL_MIN = 0.90

    # Tolerance when comparing effective q against theoretical q
    Q_TOLERANCE = 1e-9


# =============================================================================
# DIAGRAM COLOURS
# =============================================================================

PHASE_COLORS = {
    ('A', '+'): '#fc2424',
    ('A', '-'): '#ad5858',
    ('B', '+'): '#11c4b8',
    ('B', '-'): '#5d9996',
    ('C', '+'): '#ebcb2f',
    ('C', '-'): '#ddce7c',
}
FALLBACK_COLOR = '#6b7280'  # Phases beyond C
EMPTY_SLOT_COLOR = '#e5e7eb'
