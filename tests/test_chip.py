from studio_utilities.tui.chip import CategoryChip


def test_category_chip_default_css_keeps_selected_state_visible():
    css = CategoryChip.DEFAULT_CSS
    assert "CategoryChip.-selected" in css
    assert "background: $accent;" in css
    assert "background: $surface-lighten-1;" in css
    assert "opacity" not in css


def test_category_chip_selected_flag_sets_class():
    assert CategoryChip("data", "Data Operations", selected=True).selected
    assert not CategoryChip("data", "Data Operations").selected


def test_category_chip_keeps_caller_classes():
    chip = CategoryChip("data", "Data Operations", selected=True, classes="wide")
    assert chip.has_class("wide")
    assert chip.has_class("-selected")
