"""
Employee API - Settings Tests
==============================

What:  Validation rules of app.config.Settings.
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettings:

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_api_prefix_trailing_slash_removed(self):
        assert Settings(api_prefix="/api/Employee/").api_prefix == "/api/Employee"

    def test_api_prefix_requires_leading_slash(self):
        with pytest.raises(ValidationError, match="must start with"):
            Settings(api_prefix="api/Employee")

    def test_empty_database_url_rejected(self):
        with pytest.raises(ValidationError, match="DATABASE_URL"):
            Settings(database_url="  ")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
