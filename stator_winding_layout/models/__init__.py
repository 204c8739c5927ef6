"""Data models for stator winding layouts."""

from .inputs import (
    PitchMode,
    WindingInputs,
    create_inputs,
    round_half_up
)
from .layout import (
    Polarity,
    Layer,
    CoilSide,
    Slot,
    Coil,
    WindingLayout
)

__all__ = [
    # Inputs
    'PitchMode',
    'WindingInputs',
    'create_inputs',
    'round_half_up',
    # Layout
    'Polarity',
    'Layer',
    'CoilSide',
    'Slot',
    'Coil',
    'WindingLayout'
]
