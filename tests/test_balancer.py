import unittest

from redoxkit.balancer import balance_redox_equation
from redoxkit.errors import ErrorKind, ParseError
from redoxkit.models import Species


class TestBalanceRedoxEquation(unittest.TestCase):
    def test_daniell(self):
        result = balance_redox_equation("Zn → Zn2+ + 2e-", "Cu2+ + 2e- → Cu")
        self.assertEqual(result.balanced, "Zn + Cu2+ → Zn2+ + Cu")
        self.assertEqual(result.electron_count, 2)
        self.assertEqual(result.reactants, (Species("Zn", 1), Species("Cu2+", 1)))
        self.assertEqual(result.products, (Species("Zn2+", 1), Species("Cu", 1)))

    def test_permanganate(self):
        result = balance_redox_equation("Fe2+ → Fe3+ + e-", "MnO4- + 8H+ + 5e- → Mn2+ + 4H2O")
        self.assertEqual(result.balanced, "5Fe2+ + MnO4- + 8H+ → 5Fe3+ + Mn2+ + 4H2O")
        self.assertEqual(result.electron_count, 5)
        self.assertIn("Electrons transferred: oxidation (1), reduction (5)", result.steps)
        self.assertIn("Scale oxidation ×5, reduction ×1", result.steps)
        self.assertEqual(result.steps[-2], "Final balanced equation:")
        self.assertEqual(result.steps[-1], result.balanced)

    def test_dichromate(self):
        result = balance_redox_equation(
            "Fe²⁺ → Fe³⁺ + e⁻", "Cr₂O₇²⁻ + 14H⁺ + 6e⁻ → 2Cr³⁺ + 7H₂O"
        )
        self.assertEqual(result.balanced, "6Fe2+ + Cr2O72- + 14H+ → 6Fe3+ + 2Cr3+ + 7H2O")
        self.assertEqual(result.electron_count, 6)

    def test_basic_medium(self):
        result = balance_redox_equation(
            "Fe2+ → Fe3+ + e-", "MnO4- + 8H+ + 5e- → Mn2+ + 4H2O", acidic=False
        )
        self.assertEqual(result.balanced, "5Fe2+ + MnO4- + 4H2O → 5Fe3+ + Mn2+ + 8OH-")
        self.assertTrue(any("basic medium" in step for step in result.steps))

    def test_acidic_has_no_medium_step(self):
        result = balance_redox_equation("Zn → Zn2+ + 2e-", "Cu2+ + 2e- → Cu")
        self.assertFalse(any("basic medium" in step for step in result.steps))

    def test_parse_error_propagates(self):
        with self.assertRaises(ParseError) as ctx:
            balance_redox_equation("Zn Zn2+ 2e-", "Cu2+ → Cu")
        self.assertEqual(ctx.exception.kind, ErrorKind.MALFORMED_REACTION)

    def test_missing_electrons_in_reduction(self):
        with self.assertRaises(ParseError) as ctx:
            balance_redox_equation("Zn → Zn2+ + 2e-", "Cu2+ → Cu")
        self.assertEqual(ctx.exception.kind, ErrorKind.MISSING_ELECTRON_TERM)


if __name__ == "__main__":
    unittest.main()
