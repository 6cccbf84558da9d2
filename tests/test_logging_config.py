"""
Tests for the loguru sink setup.
"""

from loguru import logger

from tsorganizer.logging_config import setup_logging


class TestFileLogging:
    """The opt-in file sink under TSORGANIZER_LOG_DIR."""

    def test_file_sink_writes_under_log_dir(self, temp_dir, monkeypatch):
        log_dir = temp_dir / "logs"
        monkeypatch.setenv("TSORGANIZER_LOG_DIR", str(log_dir))

        setup_logging(suppress_console=True, enable_file_logging=True, force=True)
        logger.info("organized a.ts")
        content = (log_dir / "tsorganizer.log").read_text(encoding="utf-8")
        setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)

        assert "organized a.ts" in content

    def test_env_flag_enables_file_sink(self, temp_dir, monkeypatch):
        log_dir = temp_dir / "logs"
        monkeypatch.setenv("TSORGANIZER_LOG_DIR", str(log_dir))
        monkeypatch.setenv("TSORGANIZER_FILE_LOGGING", "yes")

        setup_logging(suppress_console=True, force=True)
        created = (log_dir / "tsorganizer.log").exists()
        setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)

        assert created

    def test_second_call_without_force_keeps_configuration(self, temp_dir, monkeypatch):
        log_dir = temp_dir / "logs"
        monkeypatch.setenv("TSORGANIZER_LOG_DIR", str(log_dir))

        setup_logging(enable_file_logging=True)

        assert not log_dir.exists()
