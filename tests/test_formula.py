import pytest

from taskbook.formula import atom_counts, condense_formula, format_counts


def test_water():
    assert atom_counts("H2O") == {"H": 2, "O": 1}
    assert condense_formula("H2O") == "H2O"


def test_bracket_multiplies_contents():
    assert atom_counts("(OH)2") == {"H": 2, "O": 2}


def test_nested_brackets():
    assert atom_counts("A(B2C)3D") == {"A": 1, "B": 6, "C": 3, "D": 1}


def test_repeated_elements_are_summed():
    assert atom_counts("HOH") == atom_counts("H2O")


def test_condense_is_idempotent():
    once = condense_formula("K4(ON(SO3)2)2")
    assert condense_formula(once) == once


def test_format_orders_and_skips():
    assert format_counts({"O": 1, "C": 2, "N": 0}) == "C2O"


def test_lowercase_rejected():
    with pytest.raises(ValueError):
        atom_counts("Na2O")


def test_leading_digit_rejected():
    with pytest.raises(ValueError):
        atom_counts("2H")


def test_unmatched_open_bracket_rejected():
    with pytest.raises(ValueError):
        atom_counts("H(")