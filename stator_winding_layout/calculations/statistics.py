"""
Statistics read from a finished layout: coil counts per phase, slot
coverage, effective q and the phase pattern signature.
"""

from dataclasses import dataclass
from typing import Dict, Tuple
import math

from ..models.layout import WindingLayout
from ..utils.constants import REFERENCE_PHASE, SIGNATURE_LENGTH, WindingRanges


@dataclass(frozen=True)
class LayoutStatistics:
    """
    Layout statistics.

    Attributes:
        phase_coil_count: Slots whose top side belongs to each phase
        all_slots_used_top: Every slot carries a top side
        all_slots_used_bottom: Every slot carries a bottom side
        actual_q: Effective slots per pole per phase of the reference phase
        phase_pattern_signature: First distinct phases with sign, e.g. ('A+', 'C-', 'B+')
        reference_phase: Phase used for actual_q and the signature
    """
    phase_coil_count: Dict[str, int]
    all_slots_used_top: bool
    all_slots_used_bottom: bool
    actual_q: float
    phase_pattern_signature: Tuple[str, ...]
    reference_phase: str = REFERENCE_PHASE

    @property
    def total_coils(self) -> int:
        return sum(self.phase_coil_count.values())

    @property
    def all_slots_used(self) -> bool:
        return self.all_slots_used_top and self.all_slots_used_bottom

    @property
    def signature_label(self) -> str:
        """Signature as display text, '—' when empty."""
        return '  '.join(self.phase_pattern_signature) if self.phase_pattern_signature else '—'

    def q_consistent(self, q: float) -> bool:
        """Effective q equals the theoretical q."""
        if not math.isfinite(self.actual_q):
            return False
        return math.isclose(self.actual_q, q, abs_tol=WindingRanges.Q_TOLERANCE)


def count_phase_coils(layout: WindingLayout) -> Dict[str, int]:
    """Top-side count per phase, in declared phase order."""
    counts = {phase: 0 for phase in layout.phases}
    for slot in layout.slots:
        if slot.top is not None:
            counts[slot.top.phase] = counts.get(slot.top.phase, 0) + 1
    return counts


def phase_pattern_signature(
    layout: WindingLayout,
    reference_phase: str = REFERENCE_PHASE,
    length: int = SIGNATURE_LENGTH
) -> Tuple[str, ...]:
    """
    First occurrence of each distinct phase in the top layer.

    Slots are scanned in index order until `length` distinct phases are
    seen. The result keeps the order of discovery, rotated so that it starts
    at the reference phase.
    """
    seen = set()
    pattern = []
    for slot in layout.slots:
        if slot.top is None:
            continue
        if slot.top.phase not in seen:
            seen.add(slot.top.phase)
            pattern.append((slot.top.phase, slot.top.label))
        if len(pattern) == length:
            break

    phases = [phase for phase, _ in pattern]
    if reference_phase in phases:
        start = phases.index(reference_phase)
        pattern = pattern[start:] + pattern[:start]
    return tuple(label for _, label in pattern)


def calculate_layout_statistics(
    layout: WindingLayout,
    n_poles: int,
    reference_phase: str = REFERENCE_PHASE
) -> LayoutStatistics:
    """
    Calculate statistics of a generated layout.

    Args:
        layout: Generated layout
        n_poles: Number of poles 2p
        reference_phase: Phase for effective q and signature

    Returns:
        LayoutStatistics
    """
    counts = count_phase_coils(layout)

    # Coils of one phase per pole: 24 slots, 4 poles gives 8 / 4 = 2 = q
    if n_poles > 0:
        actual_q = counts.get(reference_phase, 0) / n_poles
    else:
        actual_q = float('nan')

    return LayoutStatistics(
        phase_coil_count=counts,
        all_slots_used_top=all(slot.top is not None for slot in layout.slots),
        all_slots_used_bottom=all(slot.bottom is not None for slot in layout.slots),
        actual_q=actual_q,
        phase_pattern_signature=phase_pattern_signature(layout, reference_phase),
        reference_phase=reference_phase
    )
