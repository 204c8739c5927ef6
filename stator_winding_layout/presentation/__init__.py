"""Views over a layout: filters, animation subsets, tables and diagrams."""

from .report import (
    ALL_PHASES,
    LayerFilter,
    filter_slot_sides,
    filter_coils,
    visible_coils,
    animation_frames,
    WindingTableRow,
    winding_table,
    format_winding_table,
    format_design_summary
)

__all__ = [
    'ALL_PHASES',
    'LayerFilter',
    'filter_slot_sides',
    'filter_coils',
    'visible_coils',
    'animation_frames',
    'WindingTableRow',
    'winding_table',
    'format_winding_table',
    'format_design_summary'
]
