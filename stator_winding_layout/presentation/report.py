"""
Read-only views over a layout for diagrams, tables and animation.

Filters and visible coil subsets are passed explicitly; nothing here
modifies a layout.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from ..models.layout import Coil, CoilSide, Layer, WindingLayout
from ..utils.constants import THREE_PHASE, WindingRanges

ALL_PHASES = 'ALL'


class LayerFilter(Enum):
    """Layers shown by a diagram."""
    BOTH = 'BOTH'
    TOP = 'TOP'
    BOTTOM = 'BOTTOM'

    @classmethod
    def parse(cls, value: Union['LayerFilter', str]) -> 'LayerFilter':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(
                f"Layer filter must be BOTH, TOP or BOTTOM, got {value!r}"
            ) from None

    def shows(self, layer: Layer) -> bool:
        if self is LayerFilter.BOTH:
            return True
        return self.value.lower() == layer.value


def _check_phase_filter(layout: WindingLayout, phase_filter: str):
    if phase_filter != ALL_PHASES and phase_filter not in layout.phases:
        raise ValueError(
            f"Phase filter must be {ALL_PHASES} or one of {', '.join(layout.phases)}, "
            f"got {phase_filter!r}"
        )


def filter_slot_sides(
    layout: WindingLayout,
    phase_filter: str = ALL_PHASES,
    layer_filter: Union[LayerFilter, str] = LayerFilter.BOTH
) -> List[Tuple[int, CoilSide]]:
    """
    Coil sides visible under a phase and layer filter.

    Returns:
        (slot index, side) pairs in slot order, top before bottom
    """
    _check_phase_filter(layout, phase_filter)
    layer_filter = LayerFilter.parse(layer_filter)

    visible = []
    for slot in layout.slots:
        for layer in (Layer.TOP, Layer.BOTTOM):
            side = slot.side(layer)
            if side is None or not layer_filter.shows(layer):
                continue
            if phase_filter == ALL_PHASES or side.phase == phase_filter:
                visible.append((slot.index, side))
    return visible


def filter_coils(coils: Sequence[Coil], phase_filter: str = ALL_PHASES) -> List[Coil]:
    """Coils of one phase, or all coils for 'ALL'."""
    if phase_filter == ALL_PHASES:
        return list(coils)
    return [coil for coil in coils if coil.phase == phase_filter]


def visible_coils(layout: WindingLayout, step: int) -> Tuple[Coil, ...]:
    """
    Coils revealed after `step` animation steps.

    Coils appear in layout order, which is series chain order.
    """
    if step < 0:
        raise ValueError(f"Animation step must be >= 0, got {step}")
    return layout.coils[:step]


def animation_frames(layout: WindingLayout):
    """Yield the visible coil subsets from no coils to the full winding."""
    for step in range(len(layout.coils) + 1):
        yield visible_coils(layout, step)


@dataclass(frozen=True)
class WindingTableRow:
    """
    One slot of the winding table.

    goes_to is the bottom slot reached by the top side; comes_from is the
    top slot the bottom side returns from.
    """
    slot: int
    top_phase: Optional[str]
    top_polarity: Optional[str]
    top_pole: Optional[int]
    goes_to: Optional[int]
    bottom_phase: Optional[str]
    bottom_polarity: Optional[str]
    bottom_pole: Optional[int]
    comes_from: Optional[int]


def winding_table(layout: WindingLayout) -> List[WindingTableRow]:
    """Tabular view of the layout, one row per slot."""
    rows = []
    for slot in layout.slots:
        top, bottom = slot.top, slot.bottom
        rows.append(WindingTableRow(
            slot=slot.index,
            top_phase=top.phase if top else None,
            top_polarity=top.polarity.value if top else None,
            top_pole=top.pole if top else None,
            goes_to=top.peer_slot if top else None,
            bottom_phase=bottom.phase if bottom else None,
            bottom_polarity=bottom.polarity.value if bottom else None,
            bottom_pole=bottom.pole if bottom else None,
            comes_from=bottom.peer_slot if bottom else None
        ))
    return rows


def format_winding_table(layout: WindingLayout) -> str:
    """Winding table as fixed-width text."""
    def cell(value) -> str:
        return '—' if value is None else str(value)

    lines = [
        f"{'Slot':>4} | {'Top':>4} {'Pole':>4} {'→ Slot':>7} | {'Bottom':>6} {'Pole':>4} {'← Slot':>7}",
        "-" * 52
    ]
    for row in winding_table(layout):
        top = f"{row.top_phase}{row.top_polarity}" if row.top_phase else '—'
        bottom = f"{row.bottom_phase}{row.bottom_polarity}" if row.bottom_phase else '—'
        lines.append(
            f"{row.slot:>4} | {top:>4} {cell(row.top_pole):>4} {cell(row.goes_to):>7} | "
            f"{bottom:>6} {cell(row.bottom_pole):>4} {cell(row.comes_from):>7}"
        )
    return "\n".join(lines)


def format_design_summary(outputs) -> str:
    """
    Result summary in the order of the result cards.

    Args:
        outputs: WindingDesignOutputs

    Returns:
        Multi-line text
    """
    geometry = outputs.geometry
    factors = outputs.factors
    stats = outputs.statistics
    counts = " · ".join(f"{phase}:{n}" for phase, n in stats.phase_coil_count.items())

    if geometry.n_phases == THREE_PHASE:
        distribution = stats.signature_label
    else:
        distribution = f"{geometry.n_phases}-phase"

    lines = [
        f"Winding type: {outputs.combo_label}",
        f"  q = {geometry.q:.3f} ({geometry.slot_type}), effective q = {stats.actual_q:.3f}",
        f"  τ = {geometry.tau:.3f} slots, y = {geometry.y} ({geometry.pitch_description})",
        f"  α = {geometry.alpha:.2f}°, β = {geometry.beta:.4f}",
        f"  Phase distribution: {distribution}",
        f"  Coils per phase: {counts}",
        f"  Kp = {factors.kp:.4f}, Kd = {factors.kd:.4f}, Kw = {factors.kw:.4f}",
        f"  {'✓ All slots filled (top & bottom)' if stats.all_slots_used else '✗ Check configuration'}"
    ]

    if factors.kw < WindingRanges.KW_PRACTICAL_MIN:
        lines.append(
            f"  ○ Kw below practical target {WindingRanges.KW_PRACTICAL_MIN:.2f}"
        )
    if not outputs.q_consistent:
        lines.append("  ○ Effective q differs from theoretical q")

    return "\n".join(lines)
