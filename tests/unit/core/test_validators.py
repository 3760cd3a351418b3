"""
Unit Tests for Shared Validators
"""

import pytest

from shopbasket.core.shared import sanitize_scalars, strip_tags


class TestStripTags:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("<b>Jane</b>", "Jane"),
            ("Tom &amp; Jerry", "Tom &amp; Jerry"),
            ('<script>alert("x")</script>Hello', "Hello"),
            ("a<!-- hidden -->b", "ab"),
            ("1 < 2", "1 < 2"),
            ("unterminated <img src=x", "unterminated "),
        ],
    )
    def test_strip_tags(self, value, expected):
        assert strip_tags(value) == expected


class TestSanitizeScalars:
    def test_scalars_are_stripped(self):
        """Test that strings and numbers are cleaned, other values kept"""
        nested = {"note": "<b>x</b>"}

        result = sanitize_scalars({"name": "<i>Doe</i>", "postal": 12345, "nostore": True, "id": None, "extra": nested})

        assert result == {"name": "Doe", "postal": "12345", "nostore": True, "id": None, "extra": nested}
