"""Core layout engine: slot allocation, series linking and orchestration."""

from .series import (
    link_series_chain,
    series_chains,
    verify_series_chains
)

from .allocation import (
    uses_integer_slot_strategy,
    phase_start_slots,
    allocate_integer_slot,
    allocate_fractional_slot,
    generate_layout
)

from .design_engine import (
    WindingDesignOutputs,
    WindingLayoutDesigner,
    generate_winding
)

from .session import LayoutSession

__all__ = [
    # Series
    'link_series_chain',
    'series_chains',
    'verify_series_chains',

    # Allocation
    'uses_integer_slot_strategy',
    'phase_start_slots',
    'allocate_integer_slot',
    'allocate_fractional_slot',
    'generate_layout',

    # Design engine
    'WindingDesignOutputs',
    'WindingLayoutDesigner',
    'generate_winding',
    'LayoutSession'
]
