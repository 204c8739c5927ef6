"""Calculation modules for winding layouts."""

from .geometry import (
    WindingGeometry,
    calculate_geometry,
    coil_pitch,
    resolve_offset
)

from .factors import (
    WindingFactors,
    gcd,
    distribution_count,
    pitch_factor,
    distribution_factor,
    calculate_winding_factors,
    harmonic_winding_factor
)

from .statistics import (
    LayoutStatistics,
    count_phase_coils,
    phase_pattern_signature,
    calculate_layout_statistics
)

__all__ = [
    # Geometry
    'WindingGeometry',
    'calculate_geometry',
    'coil_pitch',
    'resolve_offset',

    # Factors
    'WindingFactors',
    'gcd',
    'distribution_count',
    'pitch_factor',
    'distribution_factor',
    'calculate_winding_factors',
    'harmonic_winding_factor',

    # Statistics
    'LayoutStatistics',
    'count_phase_coils',
    'phase_pattern_signature',
    'calculate_layout_statistics'
]
