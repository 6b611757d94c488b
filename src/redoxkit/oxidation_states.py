"""Rule-of-thumb oxidation states for common elements."""

from __future__ import annotations

GROUP_1 = ("Li", "Na", "K")
GROUP_2 = ("Mg", "Ca", "Ba")


def identify_oxidation_state(element: str, compound: str) -> int | None:
    """Return the usual oxidation state of `element` in `compound`.

    Only the textbook assignment rules are covered (O, H, F, Cl, groups 1-2,
    Al); anything else returns None. Elemental forms (O2, H2, Cl2) are not
    given a rule.
    """
    if element == "O" and compound != "O2":
        return -2
    if element == "H" and compound != "H2":
        return 1
    if element == "F":
        return -1
    if element == "Cl" and compound != "Cl2":
        return -1
    if element in GROUP_1:
        return 1
    if element in GROUP_2:
        return 2
    if element == "Al":
        return 3
    return None
