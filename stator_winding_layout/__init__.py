"""
Stator Winding Layout Package

Layout generator for double-layer, multi-phase stator windings: pole and
coil pitch, slots per pole per phase, winding factors and a concrete
coil-to-slot assignment with series connections.

Usage:
    from stator_winding_layout import generate_winding

    outputs = generate_winding(
        n_slots=24,
        n_poles=4,
        n_phases=3,
        pitch_mode='short',
        offset=1
    )
    print(outputs.combo_label, outputs.factors.kw)
"""

from .models import (
    # Inputs
    PitchMode,
    WindingInputs,
    create_inputs,
    # Layout
    Polarity,
    Layer,
    CoilSide,
    Slot,
    Coil,
    WindingLayout
)

from .calculations import (
    # Geometry
    WindingGeometry,
    calculate_geometry,
    # Factors
    WindingFactors,
    calculate_winding_factors,
    harmonic_winding_factor,
    # Statistics
    LayoutStatistics,
    calculate_layout_statistics
)

from .core import (
    generate_layout,
    series_chains,
    verify_series_chains,
    WindingDesignOutputs,
    WindingLayoutDesigner,
    generate_winding,
    LayoutSession
)

from .presentation import (
    LayerFilter,
    filter_slot_sides,
    filter_coils,
    visible_coils,
    winding_table,
    format_design_summary
)

from .utils import (
    WindingLayoutError,
    InvalidConfiguration,
    WindingRanges
)

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    'generate_winding',
    'WindingLayoutDesigner',
    'WindingDesignOutputs',
    'LayoutSession',

    # Models
    'PitchMode',
    'WindingInputs',
    'create_inputs',
    'Polarity',
    'Layer',
    'CoilSide',
    'Slot',
    'Coil',
    'WindingLayout',

    # Calculations
    'WindingGeometry',
    'calculate_geometry',
    'WindingFactors',
    'calculate_winding_factors',
    'harmonic_winding_factor',
    'LayoutStatistics',
    'calculate_layout_statistics',
    'generate_layout',
    'series_chains',
    'verify_series_chains',

    # Presentation
    'LayerFilter',
    'filter_slot_sides',
    'filter_coils',
    'visible_coils',
    'winding_table',
    'format_design_summary',

    # Utils
    'WindingLayoutError',
    'InvalidConfiguration',
    'WindingRanges'
]
