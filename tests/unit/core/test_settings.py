"""
Unit Tests for Settings
"""

import pytest
from pydantic import ValidationError

from shopbasket.config import Settings


class TestSettings:
    """Test cases for environment based configuration"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BASKET_DECORATORS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.BASKET_LIMIT_COUNT == 5
        assert settings.BASKET_LIMIT_SECONDS == 900
        assert settings.BASKET_COUPON_ALLOWED == 1
        assert settings.BASKET_DECORATORS == ["select", "bundle", "stock", "category"]
        assert settings.BASKET_REQUIRE_VARIANT is True

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("stock,category", ["stock", "category"]),
            (" Select , bundle ", ["select", "bundle"]),
            ('["bundle"]', ["bundle"]),
            ("", []),
        ],
    )
    def test_decorators_from_environment(self, monkeypatch, raw, expected):
        """Test comma separated and JSON lists of decorators"""
        monkeypatch.setenv("BASKET_DECORATORS", raw)

        assert Settings(_env_file=None).BASKET_DECORATORS == expected

    def test_unknown_decorator(self):
        with pytest.raises(ValidationError, match="Unknown basket decorators"):
            Settings(_env_file=None, BASKET_DECORATORS=["select", "gift"])

    def test_negative_limits(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, BASKET_LIMIT_COUNT=-1)

    def test_page_size(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, BASKET_MAX_PAGE_SIZE=0)

    def test_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_FORMAT="xml")
