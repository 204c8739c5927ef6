#!/usr/bin/env python3
"""
Example: layouts of the four winding classes.

Runs integer/fractional-slot and full/short-pitch designs, prints their
results and winding table, steps through the series-connection animation,
and draws the linear and circular diagrams of the short-pitched design.
"""

from __future__ import annotations

from pathlib import Path
import sys

# Allow running the script from the repo root without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import matplotlib.pyplot as plt

from stator_winding_layout import (
    InvalidConfiguration,
    LayoutSession,
    format_design_summary,
    generate_winding,
    visible_coils,
)
from stator_winding_layout.presentation.report import format_winding_table
from stator_winding_layout.presentation.diagram import (
    plot_circular_diagram,
    plot_linear_diagram,
)


def _print_section(title: str) -> None:
    """Utility to format console sections consistently."""
    line = "=" * 70
    print(f"\n{line}\n{title}\n{line}")


def run_four_classes() -> None:
    """One design per winding class."""
    _print_section("WINDING CLASSES")
    designs = [
        dict(n_slots=24, n_poles=4, pitch_mode='full'),
        dict(n_slots=24, n_poles=4, pitch_mode='short', offset=1),
        dict(n_slots=30, n_poles=4, pitch_mode='full'),
        dict(n_slots=30, n_poles=4, pitch_mode='short', offset=2),
    ]
    for design in designs:
        outputs = generate_winding(**design)
        print(f"\nZ={design['n_slots']}, 2p={design['n_poles']}, {design['pitch_mode']} pitch")
        print(format_design_summary(outputs))


def run_session() -> LayoutSession:
    """Publish a layout, then show that a bad request keeps it."""
    _print_section("LAYOUT SESSION")
    session = LayoutSession(verbose=True)
    session.calculate(24, 4, pitch_mode='short', offset=1)

    try:
        session.calculate(24, 5)
    except InvalidConfiguration as error:
        print(f"\nRejected: {error} (kind={error.kind})")
    print(f"Published layout kept: Z={session.current.layout.n_slots}, "
          f"results visible: {session.results_visible}")
    return session


def run_table_and_animation(session: LayoutSession) -> None:
    _print_section("WINDING TABLE")
    layout = session.current.layout
    print(format_winding_table(layout))

    _print_section("SERIES CONNECTION ORDER")
    for step in (1, 2, len(layout.coils)):
        shown = visible_coils(layout, step)
        print(f"Step {step:>2}: " + " ".join(f"C{coil.id}" for coil in shown[-4:]))

    fig, _ = plot_linear_diagram(layout, layer_filter='BOTH')
    fig.tight_layout()
    fig, _ = plot_circular_diagram(layout, phase_filter='A')
    fig.tight_layout()
    plt.show()


def main() -> None:
    run_four_classes()
    session = run_session()
    run_table_and_animation(session)


if __name__ == "__main__":
    main()
