"""
Tests for unified_ui.widgets.badges
"""

import pytest

from unified_ui.styles import STATUS_STYLES
from unified_ui.widgets.badges import StatusBadge


class TestStatusBadge:
    @pytest.mark.parametrize(
        "variant,category",
        [
            ("ACTIVE", "success"),
            ("completed", "success"),
            ("Inactive", "error"),
            ("pending", "warning"),
            ("In Progress", "info"),
            ("archived", "neutral"),
            (None, "neutral"),
        ],
    )
    def test_variant_category(self, qtbot, variant, category):
        badge = StatusBadge("Label", variant=variant)
        qtbot.addWidget(badge)

        assert badge.category() == category
        assert badge.colors() == STATUS_STYLES[category]

    def test_text_is_verbatim(self, qtbot):
        badge = StatusBadge("In Review", variant="pending")
        qtbot.addWidget(badge)

        assert badge.text() == "In Review"

    def test_set_variant(self, qtbot):
        badge = StatusBadge("Done", variant="pending")
        qtbot.addWidget(badge)

        badge.set_variant("completed")

        assert badge.category() == "success"
        assert STATUS_STYLES["success"][0] in badge.styleSheet()

    def test_size_in_stylesheet(self, qtbot):
        badge = StatusBadge("x", size="sm")
        qtbot.addWidget(badge)

        assert "padding: 2px 8px" in badge.styleSheet()
        assert "font-size: 10px" in badge.styleSheet()
