"""
Main design engine for double-layer winding layouts.

This module orchestrates the complete layout process:
1. Geometry (τ, y, q, α, β) from the inputs
2. Winding factors
3. Slot allocation and series linking
4. Layout statistics and consistency check
"""

from dataclasses import dataclass
from typing import Any, Union

from ..models.inputs import WindingInputs, PitchMode
from ..models.layout import WindingLayout
from ..calculations.geometry import WindingGeometry, calculate_geometry
from ..calculations.factors import WindingFactors, calculate_winding_factors
from ..calculations.statistics import LayoutStatistics, calculate_layout_statistics
from .allocation import generate_layout
from .series import verify_series_chains


@dataclass(frozen=True)
class WindingDesignOutputs:
    """
    Complete layout outputs.
    """
    inputs: WindingInputs
    geometry: WindingGeometry
    factors: WindingFactors
    layout: WindingLayout
    statistics: LayoutStatistics

    @property
    def combo_label(self) -> str:
        return self.geometry.combo_label

    @property
    def strategy(self) -> str:
        return self.layout.strategy

    @property
    def q_consistent(self) -> bool:
        """Effective q from the layout matches the theoretical q."""
        return self.statistics.q_consistent(self.geometry.q)

    def derived_values(self) -> dict:
        """Derived values bundle handed to reports and diagrams."""
        return {
            'tau': self.geometry.tau,
            'y': self.geometry.y,
            'q': self.geometry.q,
            'alpha': self.geometry.alpha,
            'beta': self.geometry.beta,
            'kp': self.factors.kp,
            'kd': self.factors.kd,
            'kw': self.factors.kw,
            'actual_q': self.statistics.actual_q,
            'phase_coil_count': dict(self.statistics.phase_coil_count),
            'all_slots_used_top': self.statistics.all_slots_used_top,
            'all_slots_used_bottom': self.statistics.all_slots_used_bottom,
            'phase_pattern_signature': self.statistics.phase_pattern_signature,
            'combo_label': self.combo_label,
            'strategy': self.strategy,
            'q_consistent': self.q_consistent
        }


class WindingLayoutDesigner:
    """
    Layout engine for double-layer stator windings.

    Usage:
        designer = WindingLayoutDesigner(inputs)
        outputs = designer.run()
    """

    def __init__(self, inputs: WindingInputs, verbose: bool = False):
        """
        Initialize the designer.

        Args:
            inputs: Validated winding inputs
            verbose: Print progress messages
        """
        self.inputs = inputs
        self.verbose = verbose

    def _log(self, message: str):
        """Print message if verbose."""
        if self.verbose:
            print(message)

    def run(self) -> WindingDesignOutputs:
        """
        Run the complete layout process.

        Returns:
            WindingDesignOutputs with a freshly built layout
        """
        self._log("=" * 60)
        self._log("DOUBLE-LAYER WINDING LAYOUT")
        self._log("=" * 60)
        self._log(f"  Slots Z: {self.inputs.n_slots}")
        self._log(f"  Poles 2p: {self.inputs.n_poles}")
        self._log(f"  Phases m: {self.inputs.n_phases}")
        self._log(f"  Pitch: {self.inputs.pitch_mode.value}")

        self._log("\n--- Step 1: Geometry ---")
        geometry = calculate_geometry(self.inputs)
        self._log(f"  Pole pitch τ: {geometry.tau:.3f} slots")
        self._log(f"  Coil pitch y: {geometry.y} slots ({geometry.pitch_description})")
        self._log(f"  q: {geometry.q:.3f} ({geometry.slot_type})")
        self._log(f"  Slot angle α: {geometry.alpha:.2f}°")

        self._log("\n--- Step 2: Winding Factors ---")
        factors = calculate_winding_factors(geometry)
        self._log(f"  Kp: {factors.kp:.4f}")
        self._log(f"  Kd: {factors.kd:.4f}")
        self._log(f"  Kw: {factors.kw:.4f}")

        self._log("\n--- Step 3: Slot Allocation ---")
        layout = generate_layout(geometry)
        self._log(f"  Strategy: {layout.strategy}")
        self._log(f"  Coils: {len(layout.coils)}")
        chains = verify_series_chains(layout)
        self._log(f"  Series chains: {chains['chains']}")
        for issue in chains['issues']:
            self._log(f"  ✗ {issue}")

        self._log("\n--- Step 4: Layout Statistics ---")
        statistics = calculate_layout_statistics(layout, self.inputs.n_poles)
        outputs = WindingDesignOutputs(
            inputs=self.inputs,
            geometry=geometry,
            factors=factors,
            layout=layout,
            statistics=statistics
        )
        counts = " · ".join(
            f"{phase}:{count}" for phase, count in statistics.phase_coil_count.items()
        )
        self._log(f"  Coils per phase: {counts}")
        self._log(f"  Effective q: {statistics.actual_q:.3f}")
        self._log(f"  Phase pattern: {statistics.signature_label}")
        status = "✓" if statistics.all_slots_used else "✗"
        self._log(f"  {status} All slots filled (top & bottom)")
        if not outputs.q_consistent:
            self._log(f"  ○ Effective q differs from theoretical q = {geometry.q:.3f}")
        self._log(f"\n  Winding type: {outputs.combo_label}")

        return outputs


def generate_winding(
    n_slots: int,
    n_poles: int,
    n_phases: int = 3,
    pitch_mode: Union[PitchMode, str] = PitchMode.FULL,
    offset: Any = 1,
    verbose: bool = False
) -> WindingDesignOutputs:
    """
    Convenience function for a complete layout run.

    Args:
        n_slots: Number of slots Z
        n_poles: Number of poles 2p
        n_phases: Number of phases m
        pitch_mode: 'full' or 'short'
        offset: Short-pitch offset in slots
        verbose: Print progress messages

    Returns:
        WindingDesignOutputs

    Raises:
        InvalidConfiguration: If the inputs cannot produce a layout
    """
    inputs = WindingInputs(
        n_slots=n_slots,
        n_poles=n_poles,
        n_phases=n_phases,
        pitch_mode=pitch_mode,
        offset=offset
    )
    return WindingLayoutDesigner(inputs, verbose=verbose).run()
