"""Tests for src/ui/components/dice_tray.py — die markup."""

import pytest

from src.ui.components.dice_tray import die_html


class TestDieHtml:
    def test_placeholder_before_first_roll(self):
        assert "Roll the die" in die_html(None)

    @pytest.mark.parametrize("face", [2, 3, 4, 5, 6])
    def test_scoring_face(self, face):
        html = die_html(face)
        assert 'class="die"' in html
        assert f"&#{9855 + face};" in html

    def test_turn_ending_face_marked(self):
        assert 'class="die bust"' in die_html(1)
