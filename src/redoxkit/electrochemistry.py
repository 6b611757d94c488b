"""Electrochemical calculators: cell potential, Nernst equation, electrolysis.

Each calculator is a pure function returning a frozen result record whose
`steps` reproduce every intermediate value in the order it was computed.

Equations:
    Cell potential:
        E°cell = E°cathode - E°anode
        ΔG° = -n * F * E°cell

    Nernst:
        E = E° - (R * T) / (n * F) * ln(Q)
        E = E° - (0.0592 / n) * log10(Q)        (T = 298.15 K only)

    Faraday's laws:
        Q = I * t,  n_e = Q / F,  n = n_e / z,  m = n * M,  V = n * V_m
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from redoxkit.constants import (
    FARADAY_CONSTANT,
    NERNST_SLOPE_25C,
    R_GAS,
    ROOM_TEMPERATURE,
    ROOM_TEMPERATURE_TOLERANCE,
    STP_MOLAR_VOLUME,
)
from redoxkit.errors import CalculationError, ErrorKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellPotentialResult:
    """Standard cell potential and the free energy it implies.

    Attributes:
        cell_potential: E°cell (V).
        spontaneous: True when E°cell > 0 (ΔG° < 0).
        delta_g: ΔG° (J/mol).
        electrons: Electrons transferred, n.
        steps: Derivation log.
    """

    cell_potential: float
    spontaneous: bool
    delta_g: float
    electrons: float
    steps: tuple[str, ...]


@dataclass(frozen=True)
class NernstResult:
    e0: float  # V
    e: float  # V
    n: float
    q: float
    temperature: float  # K
    steps: tuple[str, ...]


@dataclass(frozen=True)
class ElectrolysisResult:
    charge: float  # C
    moles_electrons: float  # mol
    moles: float  # mol
    mass: float  # g
    volume: float | None  # L at STP, gases only
    time: float  # s
    current: float  # A
    steps: tuple[str, ...]


def calculate_cell_potential(
    cathode_potential: float,
    anode_potential: float,
    electrons_transferred: float = 2,
) -> CellPotentialResult:
    cell_potential = cathode_potential - anode_potential
    spontaneous = cell_potential > 0
    delta_g = -electrons_transferred * FARADAY_CONSTANT * cell_potential

    steps = (
        "Calculating standard cell potential",
        f"E°cathode = {cathode_potential:.3f} V",
        f"E°anode = {anode_potential:.3f} V",
        f"E°cell = E°cathode - E°anode = {cathode_potential:.3f} - ({anode_potential:.3f})"
        f" = {cell_potential:.3f} V",
        f"ΔG° = -nFE°cell = -{electrons_transferred} × {FARADAY_CONSTANT} × {cell_potential:.3f}"
        f" = {delta_g:.1f} J/mol",
        "Spontaneous (E°cell > 0)" if spontaneous else "Non-spontaneous (E°cell ≤ 0)",
    )
    logger.debug("E°cell=%.4f V, ΔG°=%.1f J/mol", cell_potential, delta_g)
    return CellPotentialResult(
        cell_potential=cell_potential,
        spontaneous=spontaneous,
        delta_g=delta_g,
        electrons=electrons_transferred,
        steps=steps,
    )


def calculate_nernst_equation(
    e0: float,
    n: float,
    q: float,
    temperature: float = ROOM_TEMPERATURE,
) -> NernstResult:
    """Cell potential at non-standard conditions.

    Args:
        e0: Standard cell potential (V).
        n: Electrons transferred (> 0).
        q: Reaction quotient (> 0).
        temperature: Temperature (K, > 0).

    Raises:
        CalculationError: ``INVALID_ELECTRON_COUNT`` for n <= 0,
            ``INVALID_REACTION_QUOTIENT`` for Q <= 0 and
            ``NON_POSITIVE_INPUT`` for T <= 0.
    """
    if not n > 0:
        raise CalculationError(
            ErrorKind.INVALID_ELECTRON_COUNT,
            f"Electron count must be positive, got {n}",
        )
    if not q > 0:
        raise CalculationError(
            ErrorKind.INVALID_REACTION_QUOTIENT,
            f"Reaction quotient must be positive for ln(Q), got {q}",
        )
    if not temperature > 0:
        raise CalculationError(
            ErrorKind.NON_POSITIVE_INPUT,
            f"Temperature must be positive (K), got {temperature}",
        )

    steps = [
        "Calculating cell potential using Nernst equation",
        f"E° = {e0:.3f} V",
        f"n = {n} electrons",
        f"Q = {q}",
        f"T = {temperature} K",
    ]

    rt_over_nf = (R_GAS * temperature) / (n * FARADAY_CONSTANT)
    correction = rt_over_nf * float(np.log(q))
    e = e0 - correction
    steps.append(f"RT/nF = {rt_over_nf:.5f} V")
    steps.append(f"E = E° - (RT/nF)ln(Q) = {e0:.3f} - {correction:.4f} = {e:.3f} V")

    if abs(temperature - ROOM_TEMPERATURE) < ROOM_TEMPERATURE_TOLERANCE:
        simplified_correction = (NERNST_SLOPE_25C / n) * float(np.log10(q))
        simplified = e0 - simplified_correction
        steps.append(
            f"At 25°C: E = E° - ({NERNST_SLOPE_25C}/n)log₁₀(Q) = {e0:.3f} - "
            f"{simplified_correction:.4f} = {simplified:.3f} V"
        )

    logger.debug("Nernst E=%.4f V (E°=%.4f, n=%s, Q=%s, T=%s)", e, e0, n, q, temperature)
    return NernstResult(e0=e0, e=e, n=n, q=q, temperature=temperature, steps=tuple(steps))


def calculate_electrolysis(
    current: float,
    time: float,
    n: float,
    molar_mass: float,
    is_gas: bool = False,
) -> ElectrolysisResult:
    """Apply Faraday's laws to an electrolysis run.

    Args:
        current: Current (A).
        time: Duration (s).
        n: Electrons per formula unit of the product.
        molar_mass: Molar mass of the product (g/mol).
        is_gas: Also report the product volume at STP.

    Raises:
        CalculationError: ``NON_POSITIVE_INPUT`` if any of current, time, n or
            molar_mass is not positive.
    """
    for name, value in (
        ("current", current),
        ("time", time),
        ("n", n),
        ("molar_mass", molar_mass),
    ):
        if not value > 0:
            raise CalculationError(
                ErrorKind.NON_POSITIVE_INPUT,
                f"{name} must be positive, got {value}",
            )

    steps = [
        "Calculating electrolysis quantities",
        f"Current (I) = {current} A",
        f"Time (t) = {time} s",
        f"Electrons per mole (n) = {n}",
        f"Molar mass (M) = {molar_mass} g/mol",
    ]

    charge = current * time
    steps.append(f"Total charge: Q = I × t = {current} × {time} = {charge} C")

    moles_electrons = charge / FARADAY_CONSTANT
    steps.append(
        f"Moles of electrons: n_e⁻ = Q / F = {charge} / {FARADAY_CONSTANT}"
        f" = {moles_electrons:.6f} mol"
    )

    moles = moles_electrons / n
    steps.append(
        f"Moles of substance: n = n_e⁻ / {n} = {moles_electrons:.6f} / {n} = {moles:.6f} mol"
    )

    mass = moles * molar_mass
    steps.append(f"Mass: m = n × M = {moles:.6f} × {molar_mass} = {mass:.4f} g")

    volume = None
    if is_gas:
        volume = moles * STP_MOLAR_VOLUME
        steps.append(
            f"Volume at STP: V = n × {STP_MOLAR_VOLUME:.6f} = {moles:.6f} × "
            f"{STP_MOLAR_VOLUME:.6f} = {volume:.4f} L"
        )

    logger.debug("Electrolysis: %.1f C -> %.6f mol, %.4f g", charge, moles, mass)
    return ElectrolysisResult(
        charge=charge,
        moles_electrons=moles_electrons,
        moles=moles,
        mass=mass,
        volume=volume,
        time=time,
        current=current,
        steps=tuple(steps),
    )
