import math

import numpy as np
import pytest

from stator_winding_layout import WindingInputs, calculate_geometry
from stator_winding_layout.calculations.geometry import resolve_offset


def geometry(*args, **kwargs):
    return calculate_geometry(WindingInputs(*args, **kwargs))


def test_integer_slot_full_pitch():
    geo = geometry(24, 4)
    assert geo.tau == 6.0
    assert geo.tau_base == 6
    assert geo.y == 6
    assert geo.offset == 0
    assert geo.q == 2.0
    assert geo.alpha == pytest.approx(30.0)
    assert geo.beta == 1.0
    assert geo.is_integer_slot
    assert geo.combo_label == 'Integer-slot, Full-pitch'


def test_integer_slot_short_pitch():
    geo = geometry(24, 4, pitch_mode='short', offset=1)
    assert geo.y == 5
    assert geo.beta == pytest.approx(5 / 6)
    assert geo.combo_label == 'Integer-slot, Short-pitch'
    assert geo.pitch_description == 'y = τ - 1'


def test_fractional_pole_pitch_uses_ceiling_as_full_pitch():
    geo = geometry(30, 4)
    assert geo.tau == 7.5
    assert geo.y == 8
    assert not geo.is_integer_slot
    assert geo.combo_label == 'Fractional-slot, Full-pitch'

    short = geometry(30, 4, pitch_mode='short', offset=2)
    assert short.y == 6
    assert short.combo_label == 'Fractional-slot, Short-pitch'


def test_rounded_down_pole_pitch_is_labelled_short():
    # tau = 2.4 rounds to y = 2 while ceil(tau) = 3
    geo = geometry(24, 10)
    assert geo.tau == pytest.approx(2.4)
    assert geo.y == 2
    assert geo.pitch_type == 'Short-pitch'
    assert geo.combo_label == 'Fractional-slot, Short-pitch'


def test_alpha_and_q_formulas():
    geo = geometry(36, 6, 3)
    assert geo.alpha == pytest.approx(360 * 3 / 36)
    assert geo.alpha_rad == pytest.approx(math.radians(30.0))
    assert geo.q == 2.0

    geo = geometry(40, 4, 5)
    assert geo.q == 2.0
    assert geo.n_phases == 5


@pytest.mark.parametrize('offset', [0, -1, 6, 7, 2.5, '2', None, True])
def test_invalid_offset_falls_back_to_one_slot(offset):
    reference = geometry(24, 4, pitch_mode='short', offset=1)
    geo = geometry(24, 4, pitch_mode='short', offset=offset)
    assert geo.y == reference.y == 5
    assert geo.offset == 1


@pytest.mark.parametrize('offset, y', [
    (1, 5), (2, 4), (3, 3), (5, 1), (2.0, 4), (np.int64(2), 4), (np.float64(3.0), 3),
])
def test_valid_offsets(offset, y):
    assert geometry(24, 4, pitch_mode='short', offset=offset).y == y


def test_offset_ignored_at_full_pitch():
    assert geometry(24, 4, pitch_mode='full', offset=3).y == 6


def test_resolve_offset():
    assert resolve_offset(3, 6) == 3
    assert resolve_offset(6, 6) == 1
    assert resolve_offset(0, 6) == 1


@pytest.mark.parametrize('Z, p2', [(24, 4), (30, 4), (36, 8), (10, 4), (48, 8), (27, 6)])
@pytest.mark.parametrize('mode', ['full', 'short'])
def test_coil_pitch_bounds(Z, p2, mode):
    geo = geometry(Z, p2, pitch_mode=mode)
    assert 0 < geo.y <= geo.tau_base
    if mode == 'full':
        assert geo.y == geo.tau_base


def test_integer_valued_offset_is_applied():
    geo = geometry(24, 4, pitch_mode='short', offset=2.0)
    assert geo.y == 4
    assert geo.offset == 2 and type(geo.offset) is int
    assert resolve_offset(np.int64(2), 6) == 2
