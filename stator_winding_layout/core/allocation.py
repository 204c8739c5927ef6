"""
Slot allocation engine for double-layer windings.

Two strategies:
1. Integer-slot, three-phase: exact placement with phases 120° apart
2. Fractional-slot / general: round-robin cursor that fills slots in order

Both link each phase/pole group in series and write a top side at the coil
start slot and an opposite-polarity return side at start + y.
"""

from typing import Dict, List, Optional
import math

from ..calculations.geometry import WindingGeometry
from ..models.inputs import round_half_up
from ..models.layout import (
    Coil, CoilSide, Layer, Polarity, Slot, WindingLayout
)
from ..utils.constants import (
    THREE_PHASE, THREE_PHASE_LABELS, PHASE_SHIFT_DEG,
    STRATEGY_INTEGER_SLOT, STRATEGY_FRACTIONAL_SLOT,
    phase_labels
)
from .series import link_series_chain


class _SlotBuffer:
    """Mutable slot sides used while a layout is being built."""

    def __init__(self, n_slots: int):
        self.n_slots = n_slots
        self.top: List[Optional[CoilSide]] = [None] * n_slots
        self.bottom: List[Optional[CoilSide]] = [None] * n_slots
        self.coils: List[Coil] = []

    def add_group(self, coils: List[Coil]):
        """Link a phase/pole group and write its sides into the slots."""
        for coil in link_series_chain(coils):
            self.top[coil.start_slot - 1] = CoilSide(
                phase=coil.phase,
                polarity=coil.polarity,
                pole=coil.pole_pair,
                peer_slot=coil.end_slot,
                coil_id=coil.id,
                layer=Layer.TOP
            )
            # Return conductor
            self.bottom[coil.end_slot - 1] = CoilSide(
                phase=coil.phase,
                polarity=coil.polarity.opposite,
                pole=coil.pole_pair,
                peer_slot=coil.start_slot,
                coil_id=coil.id,
                layer=Layer.BOTTOM
            )
            self.coils.append(coil)

    def freeze(self, phases: tuple, strategy: str) -> WindingLayout:
        slots = tuple(
            Slot(index=i + 1, top=self.top[i], bottom=self.bottom[i])
            for i in range(self.n_slots)
        )
        return WindingLayout(
            slots=slots,
            coils=tuple(self.coils),
            phases=phases,
            strategy=strategy
        )


def _make_coil(coil_id: int, phase: str, pole: int, start: int, y: int, n_slots: int) -> Coil:
    """Coil from a 0-based start slot."""
    return Coil(
        id=coil_id,
        phase=phase,
        pole_index=pole,
        start_slot=start + 1,
        end_slot=(start + y) % n_slots + 1,
        polarity=Polarity.for_pole(pole)
    )


def uses_integer_slot_strategy(geometry: WindingGeometry) -> bool:
    """Exact placement applies to integer-q three-phase windings only."""
    return geometry.is_integer_slot and geometry.n_phases == THREE_PHASE


def phase_start_slots(geometry: WindingGeometry) -> Dict[str, int]:
    """
    0-based start slot of each phase, 120° electrical apart.

    The slot offset is round(120 / α).
    """
    Z = geometry.n_slots
    delta_slots = round_half_up(PHASE_SHIFT_DEG / geometry.alpha)
    start_a = 0
    return {
        'A': start_a,
        'B': (start_a + delta_slots) % Z,
        'C': (start_a + 2 * delta_slots) % Z
    }


def allocate_integer_slot(geometry: WindingGeometry) -> WindingLayout:
    """
    Integer-slot three-phase allocation.

    For each phase and pole, q consecutive coils start at
    (phase start + round(pole * Z/2p) + c) mod Z.
    """
    Z = geometry.n_slots
    p2 = geometry.n_poles
    q = Z // (p2 * geometry.n_phases)
    starts = phase_start_slots(geometry)
    buffer = _SlotBuffer(Z)

    coil_id = 1
    for phase in THREE_PHASE_LABELS:
        for pole in range(p2):
            group = []
            for c in range(q):
                start = (starts[phase] + round_half_up(pole * Z / p2) + c) % Z
                group.append(_make_coil(coil_id, phase, pole, start, geometry.y, Z))
                coil_id += 1
            buffer.add_group(group)

    return buffer.freeze(THREE_PHASE_LABELS, STRATEGY_INTEGER_SLOT)


def allocate_fractional_slot(geometry: WindingGeometry) -> WindingLayout:
    """
    General allocation for fractional q or m != 3.

    A single cursor walks the slots; under each pole every phase in turn
    takes ceil(q) coils, except the last (remainder) phase which takes
    floor(q). Slots left when the cursor stops stay empty.
    """
    Z = geometry.n_slots
    phases = phase_labels(geometry.n_phases)
    remainder_phase = phases[-1]
    q_ceil = math.ceil(geometry.q)
    q_floor = math.floor(geometry.q)
    buffer = _SlotBuffer(Z)

    cursor = 0
    coil_id = 1
    for pole in range(geometry.n_poles):
        for phase in phases:
            n_coils = q_floor if phase == remainder_phase else q_ceil
            group = []
            for _ in range(n_coils):
                if cursor >= Z:
                    break
                group.append(_make_coil(coil_id, phase, pole, cursor, geometry.y, Z))
                coil_id += 1
                cursor += 1
            buffer.add_group(group)

    return buffer.freeze(phases, STRATEGY_FRACTIONAL_SLOT)


def generate_layout(geometry: WindingGeometry) -> WindingLayout:
    """
    Generate the double-layer layout for a winding geometry.

    Args:
        geometry: Winding geometry

    Returns:
        A new WindingLayout; nothing is shared with earlier layouts
    """
    if uses_integer_slot_strategy(geometry):
        return allocate_integer_slot(geometry)
    return allocate_fractional_slot(geometry)
