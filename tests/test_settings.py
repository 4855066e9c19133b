"""Tests for environment-driven settings."""

from invoice_roi.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("SUPABASE_URL", "SUPABASE_KEY", "SCENARIOS_TABLE", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.supabase_url == ""
        assert settings.scenarios_table == "scenarios"
        assert settings.cors_origins == ["http://localhost:3000"]
        assert settings.log_level == "INFO"
        assert settings.report_title == "ROI Analysis Report"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
        monkeypatch.setenv("SCENARIOS_TABLE", "roi_scenarios")
        monkeypatch.setenv("CORS_ORIGINS", '["https://roi.example.com"]')
        settings = Settings(_env_file=None)
        assert settings.supabase_url == "https://project.supabase.co"
        assert settings.scenarios_table == "roi_scenarios"
        assert settings.cors_origins == ["https://roi.example.com"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
