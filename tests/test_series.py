from dataclasses import replace

import pytest

from stator_winding_layout import (
    Coil, Polarity, WindingInputs, calculate_geometry, generate_layout,
    series_chains, verify_series_chains
)
from stator_winding_layout.core.series import link_series_chain


def make_coil(coil_id, start, phase='A', pole=0, next_coil_id=None):
    return Coil(
        id=coil_id,
        phase=phase,
        pole_index=pole,
        start_slot=start,
        end_slot=start + 5,
        polarity=Polarity.POSITIVE,
        next_coil_id=next_coil_id
    )


def test_link_sorts_by_start_slot_and_links_in_order():
    linked = link_series_chain([make_coil(1, 12), make_coil(2, 3), make_coil(3, 7)])
    assert [coil.start_slot for coil in linked] == [3, 7, 12]
    assert [coil.next_coil_id for coil in linked] == [3, 1, None]


def test_link_returns_new_coils():
    original = [make_coil(1, 4), make_coil(2, 5)]
    linked = link_series_chain(original)
    assert original[0].next_coil_id is None
    assert linked[0].next_coil_id == 2


def test_link_single_and_empty_groups():
    assert link_series_chain([]) == []
    assert link_series_chain([make_coil(1, 1)])[0].next_coil_id is None


def test_series_chains_follow_links():
    coils = link_series_chain([make_coil(1, 1), make_coil(2, 2)])
    coils += link_series_chain([make_coil(3, 9, pole=1), make_coil(4, 10, pole=1)])
    chains = series_chains(coils)
    assert [[coil.id for coil in chain] for chain in chains] == [[1, 2], [3, 4]]


def test_series_chains_of_partial_coil_list():
    coils = link_series_chain([make_coil(1, 1), make_coil(2, 2), make_coil(3, 3)])
    chains = series_chains(coils[:2])
    assert [[coil.id for coil in chain] for chain in chains] == [[1, 2]]


@pytest.mark.parametrize('args', [
    (24, 4), (36, 4), (48, 8), (10, 4), (30, 4), (40, 4, 5), (54, 6),
])
@pytest.mark.parametrize('mode', ['full', 'short'])
def test_generated_chains_are_intact(args, mode):
    geometry = calculate_geometry(WindingInputs(*args, pitch_mode=mode))
    layout = generate_layout(geometry)
    result = verify_series_chains(layout)
    assert result['valid'], result['issues']

    by_id = layout.coil_map()
    for coil in layout.coils:
        steps = 0
        current = coil
        while current.next_coil_id is not None:
            successor = by_id[current.next_coil_id]
            assert successor.group == current.group
            assert successor.start_slot > current.start_slot
            current = successor
            steps += 1
            assert steps <= geometry.n_slots


def test_one_chain_per_phase_and_pole():
    layout = generate_layout(calculate_geometry(WindingInputs(24, 4)))
    chains = series_chains(layout.coils)
    assert len(chains) == 3 * 4
    assert all(len(chain) == 2 for chain in chains)
    assert verify_series_chains(layout)['chains'] == 12


def test_verify_reports_broken_links():
    layout = generate_layout(calculate_geometry(WindingInputs(24, 4)))
    coils = list(layout.coils)
    first = coils[0]
    other_group = next(coil for coil in coils if coil.group != first.group)
    coils[0] = replace(first, next_coil_id=other_group.id)
    coils[1] = replace(coils[1], next_coil_id=999)
    broken = replace(layout, coils=tuple(coils))

    result = verify_series_chains(broken)
    assert not result['valid']
    assert any('missing coil 999' in issue for issue in result['issues'])
    assert any('links to coil' in issue for issue in result['issues'])


def test_verify_detects_cycles():
    coils = (make_coil(1, 1, next_coil_id=2), make_coil(2, 2, next_coil_id=1))
    layout = generate_layout(calculate_geometry(WindingInputs(24, 4)))
    cyclic = replace(layout, coils=coils)
    result = verify_series_chains(cyclic)
    assert not result['valid']
    assert any('does not terminate' in issue for issue in result['issues'])
