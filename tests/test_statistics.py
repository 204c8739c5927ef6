import math

import pytest

from stator_winding_layout import (
    CoilSide, Layer, Polarity, Slot, WindingLayout, calculate_layout_statistics,
    generate_winding
)
from stator_winding_layout.calculations.statistics import phase_pattern_signature


def side(phase, polarity):
    return CoilSide(
        phase=phase, polarity=polarity, pole=1, peer_slot=1, coil_id=1, layer=Layer.TOP
    )


def layout_with_tops(*tops):
    slots = tuple(Slot(index=i + 1, top=top) for i, top in enumerate(tops))
    return WindingLayout(slots=slots, coils=(), phases=('A', 'B', 'C'), strategy='test')


def test_statistics_of_balanced_layout(full_pitch_24):
    stats = full_pitch_24.statistics
    assert stats.phase_coil_count == {'A': 8, 'B': 8, 'C': 8}
    assert stats.total_coils == 24
    assert stats.all_slots_used_top and stats.all_slots_used_bottom
    assert stats.actual_q == 2.0
    assert stats.q_consistent(2.0)
    assert stats.phase_pattern_signature == ('A+', 'C-', 'B+')
    assert stats.signature_label == 'A+  C-  B+'


def test_statistics_of_incomplete_layout(fractional_10):
    stats = fractional_10.statistics
    assert stats.phase_coil_count == {'A': 4, 'B': 4, 'C': 0}
    assert not stats.all_slots_used_top
    assert not stats.all_slots_used_bottom
    assert stats.actual_q == 1.0
    assert not stats.q_consistent(10 / 12)
    assert stats.phase_pattern_signature == ('A+', 'B+')


def test_signature_rotates_to_reference_phase():
    layout = layout_with_tops(
        side('B', Polarity.POSITIVE),
        side('A', Polarity.NEGATIVE),
        side('B', Polarity.NEGATIVE),
        side('C', Polarity.POSITIVE),
        side('A', Polarity.POSITIVE),
    )
    assert phase_pattern_signature(layout) == ('A-', 'C+', 'B+')


def test_signature_stops_after_three_phases():
    layout = layout_with_tops(
        None,
        side('A', Polarity.POSITIVE),
        side('B', Polarity.NEGATIVE),
        side('C', Polarity.POSITIVE),
        side('D', Polarity.POSITIVE),
    )
    assert phase_pattern_signature(layout) == ('A+', 'B-', 'C+')


def test_signature_without_reference_phase_keeps_discovery_order():
    layout = layout_with_tops(side('C', Polarity.POSITIVE), side('B', Polarity.POSITIVE))
    assert phase_pattern_signature(layout) == ('C+', 'B+')


def test_empty_layout_signature_label():
    stats = calculate_layout_statistics(layout_with_tops(None, None), n_poles=2)
    assert stats.phase_pattern_signature == ()
    assert stats.signature_label == '—'
    assert stats.phase_coil_count == {'A': 0, 'B': 0, 'C': 0}


def test_zero_poles_reports_non_finite_q():
    stats = calculate_layout_statistics(layout_with_tops(side('A', Polarity.POSITIVE)), n_poles=0)
    assert math.isnan(stats.actual_q)
    assert not stats.q_consistent(1.0)


@pytest.mark.parametrize('Z, p2', [(18, 2), (36, 4), (48, 8), (72, 6)])
def test_effective_q_matches_theory_for_integer_slot(Z, p2):
    outputs = generate_winding(Z, p2)
    assert outputs.statistics.actual_q == pytest.approx(outputs.geometry.q)
    assert outputs.q_consistent
