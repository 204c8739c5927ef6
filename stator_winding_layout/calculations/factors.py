"""
Winding factors: pitch, distribution and total winding factor.
"""

from dataclasses import dataclass
import math

from .geometry import WindingGeometry


@dataclass(frozen=True)
class WindingFactors:
    """
    Fundamental winding factors.

    Attributes:
        kp: Pitch factor K_p
        kd: Distribution factor K_d
        kw: Winding factor K_w = K_p * K_d
        distribution_count: Number of distributed slots used for K_d
            (q for integer-slot, Z/gcd(Z, 2p) for fractional-slot)
    """
    kp: float
    kd: float
    kw: float
    distribution_count: float


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid); gcd(a, 0) = a."""
    while b:
        a, b = b, a % b
    return a


def distribution_count(geometry: WindingGeometry) -> float:
    """
    Slot count used in the distribution factor.

    q when q is an integer; otherwise t = Z / gcd(Z, 2p), the slot count of
    the smallest repeating unit of the machine.
    """
    if geometry.is_integer_slot:
        return geometry.q
    return geometry.n_slots / gcd(geometry.n_slots, geometry.n_poles)


def pitch_factor(geometry: WindingGeometry, harmonic: int = 1) -> float:
    """
    Pitch (chording) factor K_p.

    K_p = sin(ν * β * 90°)

    Equals 1 for full pitch and drops below 1 for short-pitched coils.
    """
    return math.sin(harmonic * geometry.beta * math.pi / 2)


def distribution_factor(geometry: WindingGeometry, harmonic: int = 1) -> float:
    """
    Distribution (breadth) factor K_d.

    K_d = sin(n * ν*α/2) / (n * sin(ν*α/2))

    with n = distribution_count(geometry).
    """
    n = distribution_count(geometry)
    half_alpha = harmonic * geometry.alpha_rad / 2
    denominator = n * math.sin(half_alpha)
    if math.isclose(denominator, 0.0, abs_tol=1e-12):
        # Removable singularity: all sides in phase
        return math.cos(n * half_alpha) / math.cos(half_alpha)
    return math.sin(n * half_alpha) / denominator


def calculate_winding_factors(geometry: WindingGeometry) -> WindingFactors:
    """
    Calculate fundamental winding factors.

    Args:
        geometry: Winding geometry

    Returns:
        WindingFactors with K_p, K_d and K_w
    """
    kp = pitch_factor(geometry)
    kd = distribution_factor(geometry)
    return WindingFactors(
        kp=kp,
        kd=kd,
        kw=kp * kd,
        distribution_count=distribution_count(geometry)
    )


def harmonic_winding_factor(geometry: WindingGeometry, harmonic: int) -> float:
    """
    Winding factor for a specific harmonic.

    Args:
        geometry: Winding geometry
        harmonic: Harmonic order (1 = fundamental, 5, 7, 11, 13, ...)

    Returns:
        Winding factor for that harmonic
    """
    if harmonic < 1:
        raise ValueError(f"Harmonic order must be >= 1, got {harmonic}")
    return pitch_factor(geometry, harmonic) * distribution_factor(geometry, harmonic)
