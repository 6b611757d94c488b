import unittest

from redoxkit.balancer import balance_redox_equation
from redoxkit.models import HalfReactionType
from redoxkit.oxidation_states import identify_oxidation_state
from redoxkit.parser import parse_half_reaction
from redoxkit.potentials import (
    EXAMPLE_CELLS,
    STANDARD_REDUCTION_POTENTIALS,
    cell_potential_from_table,
    get_all_half_reactions,
    get_example_cell,
    get_standard_entry,
    get_standard_potential,
)


class TestStandardPotentials(unittest.TestCase):
    def test_lookup(self):
        self.assertAlmostEqual(get_standard_potential("Cu2+/Cu"), 0.34)
        self.assertAlmostEqual(get_standard_potential("Zn2+/Zn"), -0.76)
        self.assertEqual(get_standard_potential("H+/H2"), 0.0)
        self.assertIsNone(get_standard_potential("Xx/X"))

    def test_entry_lookup(self):
        entry = get_standard_entry("MnO4-/Mn2+")
        self.assertEqual(entry.reaction_text, "MnO₄⁻ + 8H⁺ + 5e⁻ → Mn²⁺ + 4H₂O")
        with self.assertRaises(KeyError):
            get_standard_entry("Xx/X")

    def test_sorted_descending(self):
        entries = get_all_half_reactions()
        self.assertEqual(len(entries), len(STANDARD_REDUCTION_POTENTIALS))
        self.assertEqual(entries[0].key, "F2/F-")
        self.assertEqual(entries[-1].key, "Li+/Li")
        potentials = [entry.e0 for entry in entries]
        self.assertEqual(potentials, sorted(potentials, reverse=True))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            STANDARD_REDUCTION_POTENTIALS["X/Y"] = None

    def test_every_entry_parses_as_reduction(self):
        for entry in STANDARD_REDUCTION_POTENTIALS.values():
            half = parse_half_reaction(entry.reaction_text)
            self.assertEqual(half.type, HalfReactionType.REDUCTION, msg=entry.key)

    def test_cell_from_table(self):
        result = cell_potential_from_table("Cu2+/Cu", "Zn2+/Zn", 2)
        self.assertAlmostEqual(result.cell_potential, 1.10)
        self.assertTrue(result.spontaneous)


class TestExampleCells(unittest.TestCase):
    def test_cell_potentials(self):
        for cell in EXAMPLE_CELLS:
            self.assertAlmostEqual(cell.cathode_e0 - cell.anode_e0, cell.cell_e0, msg=cell.name)

    def test_lookup_by_name(self):
        self.assertEqual(get_example_cell("daniell cell").cell_e0, 1.10)
        self.assertIsNone(get_example_cell("Voltaic pile"))

    def test_lead_acid_balances(self):
        cell = get_example_cell("Lead-Acid Battery")
        result = balance_redox_equation(cell.anode, cell.cathode)
        self.assertEqual(result.balanced, "Pb + 2SO42- + PbO2 + 4H+ → 2PbSO4 + 2H2O")

    def test_car_battery(self):
        # six lead-acid cells in series
        self.assertAlmostEqual(6 * get_example_cell("Lead-Acid Battery").cell_e0, 12.24)


class TestOxidationStates(unittest.TestCase):
    def test_rules(self):
        self.assertEqual(identify_oxidation_state("O", "H2O"), -2)
        self.assertEqual(identify_oxidation_state("H", "HCl"), 1)
        self.assertEqual(identify_oxidation_state("F", "NaF"), -1)
        self.assertEqual(identify_oxidation_state("Cl", "NaCl"), -1)
        self.assertEqual(identify_oxidation_state("Na", "NaCl"), 1)
        self.assertEqual(identify_oxidation_state("Ca", "CaCO3"), 2)
        self.assertEqual(identify_oxidation_state("Al", "Al2O3"), 3)

    def test_unknown_or_elemental(self):
        self.assertIsNone(identify_oxidation_state("Mn", "KMnO4"))
        self.assertIsNone(identify_oxidation_state("O", "O2"))
        self.assertIsNone(identify_oxidation_state("Cl", "Cl2"))


if __name__ == "__main__":
    unittest.main()
