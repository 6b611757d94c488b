"""Standard reduction potentials at 25 °C and a few textbook cells.

More positive E° means a stronger oxidising agent (prefers to be reduced);
more negative E° means a stronger reducing agent.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from redoxkit.electrochemistry import CellPotentialResult, calculate_cell_potential


@dataclass(frozen=True)
class StandardPotentialEntry:
    key: str
    reaction_text: str
    e0: float  # V vs SHE


@dataclass(frozen=True)
class ExampleCell:
    name: str
    anode: str
    cathode: str
    anode_e0: float
    cathode_e0: float
    cell_e0: float
    description: str


def _table(*entries: StandardPotentialEntry) -> MappingProxyType:
    return MappingProxyType({entry.key: entry for entry in entries})


STANDARD_REDUCTION_POTENTIALS = _table(
    # strong oxidisers
    StandardPotentialEntry("F2/F-", "F₂ + 2e⁻ → 2F⁻", 2.87),
    StandardPotentialEntry("Cl2/Cl-", "Cl₂ + 2e⁻ → 2Cl⁻", 1.36),
    StandardPotentialEntry("Br2/Br-", "Br₂ + 2e⁻ → 2Br⁻", 1.07),
    StandardPotentialEntry("Ag+/Ag", "Ag⁺ + e⁻ → Ag", 0.80),
    StandardPotentialEntry("Cu2+/Cu", "Cu²⁺ + 2e⁻ → Cu", 0.34),
    StandardPotentialEntry("H+/H2", "2H⁺ + 2e⁻ → H₂", 0.0),  # reference
    # strong reducers
    StandardPotentialEntry("Pb2+/Pb", "Pb²⁺ + 2e⁻ → Pb", -0.13),
    StandardPotentialEntry("Ni2+/Ni", "Ni²⁺ + 2e⁻ → Ni", -0.25),
    StandardPotentialEntry("Fe2+/Fe", "Fe²⁺ + 2e⁻ → Fe", -0.44),
    StandardPotentialEntry("Zn2+/Zn", "Zn²⁺ + 2e⁻ → Zn", -0.76),
    StandardPotentialEntry("Al3+/Al", "Al³⁺ + 3e⁻ → Al", -1.66),
    StandardPotentialEntry("Mg2+/Mg", "Mg²⁺ + 2e⁻ → Mg", -2.37),
    StandardPotentialEntry("Na+/Na", "Na⁺ + e⁻ → Na", -2.71),
    StandardPotentialEntry("Li+/Li", "Li⁺ + e⁻ → Li", -3.04),
    # oxoanions and other common couples
    StandardPotentialEntry("MnO4-/Mn2+", "MnO₄⁻ + 8H⁺ + 5e⁻ → Mn²⁺ + 4H₂O", 1.51),
    StandardPotentialEntry("Cr2O7 2-/Cr3+", "Cr₂O₇²⁻ + 14H⁺ + 6e⁻ → 2Cr³⁺ + 7H₂O", 1.33),
    StandardPotentialEntry("O2/H2O", "O₂ + 4H⁺ + 4e⁻ → 2H₂O", 1.23),
    StandardPotentialEntry("I2/I-", "I₂ + 2e⁻ → 2I⁻", 0.54),
    StandardPotentialEntry("Fe3+/Fe2+", "Fe³⁺ + e⁻ → Fe²⁺", 0.77),
    StandardPotentialEntry("Sn4+/Sn2+", "Sn⁴⁺ + 2e⁻ → Sn²⁺", 0.15),
)


EXAMPLE_CELLS = (
    ExampleCell(
        name="Daniell Cell",
        anode="Zn²⁺ + 2e⁻ → Zn",
        cathode="Cu²⁺ + 2e⁻ → Cu",
        anode_e0=-0.76,
        cathode_e0=0.34,
        cell_e0=1.10,
        description="Classic zinc-copper cell",
    ),
    ExampleCell(
        name="Lead-Acid Battery",
        anode="Pb + SO₄²⁻ → PbSO₄ + 2e⁻",
        cathode="PbO₂ + 4H⁺ + SO₄²⁻ + 2e⁻ → PbSO₄ + 2H₂O",
        anode_e0=-0.35,
        cathode_e0=1.69,
        cell_e0=2.04,
        description="Rechargeable battery used in cars",
    ),
    ExampleCell(
        name="Hydrogen-Oxygen Fuel Cell",
        anode="2H₂ → 4H⁺ + 4e⁻",
        cathode="O₂ + 4H⁺ + 4e⁻ → 2H₂O",
        anode_e0=0.0,
        cathode_e0=1.23,
        cell_e0=1.23,
        description="Clean energy fuel cell",
    ),
)


def get_standard_potential(key: str) -> float | None:
    entry = STANDARD_REDUCTION_POTENTIALS.get(key)
    return entry.e0 if entry is not None else None


def get_standard_entry(key: str) -> StandardPotentialEntry:
    try:
        return STANDARD_REDUCTION_POTENTIALS[key]
    except KeyError:
        raise KeyError(f"Unknown half-cell: {key}") from None


def get_all_half_reactions() -> list[StandardPotentialEntry]:
    """All table entries, highest E° first."""
    return sorted(STANDARD_REDUCTION_POTENTIALS.values(), key=lambda entry: entry.e0, reverse=True)


def get_example_cell(name: str) -> ExampleCell | None:
    for cell in EXAMPLE_CELLS:
        if cell.name.lower() == name.lower():
            return cell
    return None


def cell_potential_from_table(
    cathode_key: str, anode_key: str, electrons_transferred: float = 2
) -> CellPotentialResult:
    """Cell potential for two half-cells looked up by key (e.g. ``"Cu2+/Cu"``)."""
    cathode = get_standard_entry(cathode_key)
    anode = get_standard_entry(anode_key)
    return calculate_cell_potential(cathode.e0, anode.e0, electrons_transferred)
