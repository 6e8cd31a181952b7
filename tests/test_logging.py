"""Tests for GitMind logging configuration and secret masking."""

import logging

import pytest


class TestSecretMasking:
    """Test secret masking in log output."""

    def test_mask_key_value(self):
        """Test key=value style secrets are masked."""
        from gitmind.wizard.ui import mask_secrets

        masked = mask_secrets("token=abc123 user=octocat")
        assert "abc123" not in masked
        assert "user=octocat" in masked

    def test_mask_cerebras_key(self):
        """Test bare Cerebras keys are masked."""
        from gitmind.wizard.ui import mask_secrets

        masked = mask_secrets("using csk-abcdefgh12345678 for request")
        assert "csk-abcdefgh12345678" not in masked
        assert "********" in masked

    def test_mask_github_token(self):
        """Test GitHub tokens are masked."""
        from gitmind.wizard.ui import mask_secrets

        token = "ghp_" + "a" * 36
        assert token not in mask_secrets(f"pushing with {token}")

    def test_empty_text(self):
        """Test empty input is returned unchanged."""
        from gitmind.wizard.ui import mask_secrets

        assert mask_secrets("") == ""

    def test_formatter_masks(self):
        """Test the formatter masks the rendered message."""
        from gitmind.wizard.logging_config import SecretMaskingFormatter

        record = logging.LogRecord(
            "gitmind.test", logging.INFO, __file__, 1,
            "api_key: %s", ("csk-abcdefgh12345678",), None
        )
        output = SecretMaskingFormatter("%(message)s").format(record)
        assert "csk-abcdefgh12345678" not in output


class TestLoggerSetup:
    """Test logger construction."""

    def test_get_logger_prefix(self):
        """Test names are placed in the gitmind namespace."""
        from gitmind.wizard.logging_config import get_logger

        assert get_logger("wizard").name == "gitmind.wizard"
        assert get_logger("gitmind.config").name == "gitmind.config"
        assert get_logger().name == "gitmind"

    def test_log_path(self, tmp_path):
        """Test the dated log file path."""
        from gitmind.wizard.logging_config import get_log_path

        path = get_log_path(tmp_path)
        assert path.parent == tmp_path / "logs"
        assert path.name.startswith("gitmind-")
        assert path.suffix == ".log"

    def test_quiet_file_logging(self, tmp_path, reset_gitmind_logger):
        """Test quiet mode logs only to the file, with secrets masked."""
        from gitmind.wizard.logging_config import get_logger, setup_logging

        log_file = tmp_path / "logs" / "gitmind.log"
        logger = setup_logging(level=logging.DEBUG, log_file=log_file, quiet=True)
        assert all(isinstance(h, logging.FileHandler) for h in logger.handlers)

        get_logger("wizard").info("saved token=supersecret")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "saved token=" in content
        assert "supersecret" not in content

    def test_quiet_without_file(self, reset_gitmind_logger):
        """Test quiet mode without a file installs a null handler."""
        from gitmind.wizard.logging_config import setup_logging

        logger = setup_logging(quiet=True)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_debug_env_sets_level(self, monkeypatch, reset_gitmind_logger):
        """Test GITMIND_DEBUG switches the default level to DEBUG."""
        from gitmind.wizard.logging_config import setup_logging

        monkeypatch.setenv("GITMIND_DEBUG", "true")
        assert setup_logging(quiet=True).level == logging.DEBUG

        monkeypatch.delenv("GITMIND_DEBUG")
        assert setup_logging(quiet=True).level == logging.INFO

    def test_console_output_masked(self, capsys, reset_gitmind_logger):
        """Test console logging writes masked records to stderr."""
        from gitmind.wizard.logging_config import get_logger, setup_logging

        setup_logging()
        get_logger("cli").warning("retrying with api_key=csk-abcdefgh12345678")

        err = capsys.readouterr().err
        assert err.startswith("WARNING: retrying with api_key=")
        assert "csk-abcdefgh12345678" not in err

    def test_env_vars_documented(self):
        """Test every environment variable is documented."""
        from gitmind.wizard.logging_config import ENV_VARS

        assert set(ENV_VARS) == {"GITMIND_DEBUG", "GITMIND_CONFIG"}
