"""
Series connection of coils.

Coils of one phase under one pole form a series chain: sorted by start
slot and linked through next_coil_id.
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Sequence

from ..models.layout import Coil, WindingLayout


def link_series_chain(coils: Sequence[Coil]) -> List[Coil]:
    """
    Order a phase/pole group around the stator and link it in series.

    Args:
        coils: Coils of a single (phase, pole) group, unlinked

    Returns:
        New coils sorted by start slot; each points at its successor,
        the last one has no successor
    """
    ordered = sorted(coils, key=lambda coil: coil.start_slot)
    linked = []
    for position, coil in enumerate(ordered):
        if position + 1 < len(ordered):
            successor = ordered[position + 1].id
        else:
            successor = None
        linked.append(replace(coil, next_coil_id=successor))
    return linked


def series_chains(coils: Iterable[Coil]) -> List[List[Coil]]:
    """
    Follow next_coil_id from every chain head.

    A coil is a head if no other coil points at it. Chains are returned in
    the order their heads appear in `coils`; a coil whose successor is not in
    `coils` ends its chain there.
    """
    coils = list(coils)
    by_id: Dict[int, Coil] = {coil.id: coil for coil in coils}
    pointed_at = {coil.next_coil_id for coil in coils if coil.next_coil_id is not None}

    chains = []
    visited = set()
    for coil in coils:
        if coil.id in pointed_at or coil.id in visited:
            continue
        chain = []
        current = coil
        while current is not None and current.id not in visited:
            chain.append(current)
            visited.add(current.id)
            current = by_id.get(current.next_coil_id)
        chains.append(chain)
    return chains


def verify_series_chains(layout: WindingLayout) -> dict:
    """
    Verify series chain integrity.

    Every successor must exist, share phase and pole group, start in a
    later slot, and every chain must end within Z steps.

    Args:
        layout: Layout to verify

    Returns:
        Dictionary with verification results
    """
    issues = []
    by_id = layout.coil_map()
    limit = layout.n_slots

    for coil in layout.coils:
        if coil.next_coil_id is None:
            continue
        successor = by_id.get(coil.next_coil_id)
        if successor is None:
            issues.append(f"Coil {coil.id} points at missing coil {coil.next_coil_id}")
            continue
        if successor.group != coil.group:
            issues.append(
                f"Coil {coil.id} ({coil.phase}, pole {coil.pole_index}) links to coil "
                f"{successor.id} ({successor.phase}, pole {successor.pole_index})"
            )
        if successor.start_slot <= coil.start_slot:
            issues.append(
                f"Coil {coil.id} in slot {coil.start_slot} links back to slot "
                f"{successor.start_slot}"
            )

    for coil in layout.coils:
        steps = 0
        current = coil
        while current.next_coil_id is not None and current.next_coil_id in by_id:
            current = by_id[current.next_coil_id]
            steps += 1
            if steps > limit:
                issues.append(f"Chain starting at coil {coil.id} does not terminate")
                break

    return {
        'valid': len(issues) == 0,
        'issues': issues,
        'chains': len(series_chains(layout.coils))
    }
