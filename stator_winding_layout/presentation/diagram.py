"""
Linear and circular double-layer winding diagrams (requires matplotlib).
"""

from typing import Optional, Sequence, Union
import math

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle, Wedge

from ..core.series import series_chains
from ..models.layout import Coil, Layer, WindingLayout
from ..utils.constants import PHASE_COLORS, FALLBACK_COLOR, EMPTY_SLOT_COLOR
from .report import ALL_PHASES, LayerFilter, filter_coils, filter_slot_sides


def side_color(phase: str, sign: str) -> str:
    """Diagram colour of a phase/sign pair."""
    return PHASE_COLORS.get((phase, sign), FALLBACK_COLOR)


def _new_axes(ax, figsize):
    if ax is None:
        return plt.subplots(figsize=figsize)
    return ax.figure, ax


def plot_linear_diagram(
    layout: WindingLayout,
    phase_filter: str = ALL_PHASES,
    layer_filter: Union[LayerFilter, str] = LayerFilter.BOTH,
    coils: Optional[Sequence[Coil]] = None,
    ax=None,
    title: str = 'Double Layer Winding - Linear Diagram'
):
    """
    Draw slots, coil sides and coil connections on a straight line.

    Every coil gets two hairpins: the top one leaves its start slot above
    the stator and ends in the bottom layer of its end slot, the return one
    runs below the stator in the colour of the opposite polarity. Both carry
    the coil label C<id>.

    Args:
        layout: Layout to draw
        phase_filter: 'ALL' or a phase label
        layer_filter: BOTH, TOP or BOTTOM
        coils: Coils whose connections are drawn (None = all coils);
            pass an animation subset to reveal coils step by step
        ax: Axes to draw into (None = new figure)
        title: Axes title

    Returns:
        (figure, axes)
    """
    layer_filter = LayerFilter.parse(layer_filter)
    fig, ax = _new_axes(ax, (max(8, layout.n_slots * 0.5), 5))

    slot_height = 1.0
    for slot in layout.slots:
        x = slot.index - 1
        ax.add_patch(Rectangle(
            (x + 0.05, 0), 0.9, 2 * slot_height,
            facecolor=EMPTY_SLOT_COLOR, edgecolor='#444444', linewidth=1.0
        ))
        ax.text(x + 0.5, 2 * slot_height + 0.15, str(slot.index),
                ha='center', va='bottom', fontsize=7)

    for index, side in filter_slot_sides(layout, phase_filter, layer_filter):
        x = index - 1
        y = slot_height if side.layer is Layer.TOP else 0
        ax.add_patch(Rectangle(
            (x + 0.1, y + 0.08), 0.8, slot_height - 0.16,
            facecolor=side_color(side.phase, side.polarity.value),
            edgecolor='#222222', linewidth=0.6
        ))
        ax.text(x + 0.5, y + slot_height / 2, side.label,
                ha='center', va='center', fontsize=7, color='white')

    if coils is None:
        coils = layout.coils
    for position, coil in enumerate(filter_coils(coils, phase_filter)):
        x1 = coil.start_slot - 0.5
        x2 = coil.end_slot - 0.5
        stagger = (position % 3) * 0.2
        label = f"C{coil.id}"

        if layer_filter is not LayerFilter.BOTTOM:
            color = side_color(coil.phase, coil.polarity.value)
            top = 2 * slot_height + 0.6 + stagger
            ax.plot([x1, x1, x2, x2], [2 * slot_height, top, top, slot_height],
                    color=color, linewidth=1.5, alpha=0.9)
            ax.text((x1 + x2) / 2, top + 0.05, label,
                    ha='center', va='bottom', fontsize=6, color=color)

        if layer_filter is not LayerFilter.TOP:
            color = side_color(coil.phase, coil.polarity.opposite.value)
            bottom = -0.6 - stagger
            ax.plot([x1, x1, x2, x2], [0, bottom, bottom, 0],
                    color=color, linewidth=1.5, alpha=0.9)
            ax.text((x1 + x2) / 2, bottom - 0.05, label,
                    ha='center', va='top', fontsize=6, color=color)

    ax.set_xlim(-0.5, layout.n_slots + 0.5)
    ax.set_ylim(-1.8, 2 * slot_height + 1.8)
    ax.set_yticks([slot_height / 2, 1.5 * slot_height])
    ax.set_yticklabels(['Bottom', 'Top'])
    ax.set_xticks([])
    ax.set_title(title)
    return fig, ax


# Ring radii of the circular diagram (outer stator radius = 1)
R_OUTER_TOP = 1.0
R_INNER_TOP = 0.88
R_OUTER_BOTTOM = 0.84
R_INNER_BOTTOM = 0.72


def slot_angle(index: int, n_slots: int) -> float:
    """Centre angle [deg] of 1-based slot `index`; slot 1 at the top, clockwise."""
    return 90.0 - (index - 0.5) * 360.0 / n_slots


def _ring_point(index: int, n_slots: int, radius: float):
    angle = math.radians(slot_angle(index, n_slots))
    return radius * math.cos(angle), radius * math.sin(angle)


def plot_circular_diagram(
    layout: WindingLayout,
    phase_filter: str = ALL_PHASES,
    layer_filter: Union[LayerFilter, str] = LayerFilter.BOTH,
    coils: Optional[Sequence[Coil]] = None,
    ax=None,
    title: str = 'Double Layer Winding - Circular Diagram'
):
    """
    Draw the stator as two slot rings and every series chain as chords.

    The outer ring holds the top layer, the inner ring the bottom layer.
    A chain is drawn as a solid polyline through the start slots of its
    coils on the top ring and a dashed polyline through their end slots on
    the bottom ring.

    Args:
        layout: Layout to draw
        phase_filter: 'ALL' or a phase label
        layer_filter: BOTH, TOP or BOTTOM
        coils: Coils whose chains are drawn (None = all coils)
        ax: Axes to draw into (None = new figure)
        title: Axes title

    Returns:
        (figure, axes)
    """
    layer_filter = LayerFilter.parse(layer_filter)
    fig, ax = _new_axes(ax, (7, 7))
    Z = layout.n_slots
    sector = 360.0 / Z

    visible = {
        (index, side.layer)
        for index, side in filter_slot_sides(layout, phase_filter, layer_filter)
    }
    rings = [
        (Layer.TOP, R_OUTER_TOP, R_INNER_TOP),
        (Layer.BOTTOM, R_OUTER_BOTTOM, R_INNER_BOTTOM),
    ]
    for layer, r_outer, r_inner in rings:
        if not layer_filter.shows(layer):
            continue
        for slot in layout.slots:
            side = slot.side(layer)
            shown = (slot.index, layer) in visible
            color = side_color(side.phase, side.polarity.value) if shown else EMPTY_SLOT_COLOR
            centre = slot_angle(slot.index, Z)
            ax.add_patch(Wedge(
                (0, 0), r_outer, centre - sector / 2, centre + sector / 2,
                width=r_outer - r_inner, facecolor=color, edgecolor='#333333', linewidth=0.7
            ))
            if shown:
                x, y = _ring_point(slot.index, Z, (r_outer + r_inner) / 2)
                ax.text(x, y, side.label, ha='center', va='center', fontsize=6, color='white')

    for slot in layout.slots:
        x, y = _ring_point(slot.index, Z, R_OUTER_TOP + 0.07)
        ax.text(x, y, str(slot.index), ha='center', va='center', fontsize=7)

    if coils is None:
        coils = layout.coils
    top_radius = (R_OUTER_TOP + R_INNER_TOP) / 2
    bottom_radius = (R_OUTER_BOTTOM + R_INNER_BOTTOM) / 2
    for chain in series_chains(filter_coils(coils, phase_filter)):
        head = chain[0]
        if layer_filter is not LayerFilter.BOTTOM:
            points = [_ring_point(coil.start_slot, Z, top_radius) for coil in chain]
            ax.plot([x for x, _ in points], [y for _, y in points],
                    color=side_color(head.phase, head.polarity.value),
                    linewidth=1.5, marker='o', markersize=2)
        if layer_filter is not LayerFilter.TOP:
            points = [_ring_point(coil.end_slot, Z, bottom_radius) for coil in chain]
            ax.plot([x for x, _ in points], [y for _, y in points],
                    color=side_color(head.phase, head.polarity.opposite.value),
                    linewidth=1.5, linestyle='--', marker='o', markersize=2)

    ax.set_xlim(-1.2, 1.2)
    ax.set_ylim(-1.2, 1.2)
    ax.set_aspect('equal')
    ax.axis('off')
    ax.set_title(title)
    return fig, ax
