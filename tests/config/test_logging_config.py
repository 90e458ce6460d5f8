import logging

import pytest

from cmdshell.config.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_package_level():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = package_logger.level
    yield
    package_logger.setLevel(saved)


def test_setup_logging_stdout(mocker):
    mock_basic = mocker.patch("logging.basicConfig")
    setup_logging("debug")
    kwargs = mock_basic.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    assert kwargs["force"] is True
    assert "stream" in kwargs
    assert "filename" not in kwargs

def test_setup_logging_file_creates_directory(mocker, tmp_path):
    mock_basic = mocker.patch("logging.basicConfig")
    log_file = tmp_path / "logs" / "cmdshell.log"
    setup_logging("INFO", str(log_file))
    assert (tmp_path / "logs").is_dir()
    assert mock_basic.call_args.kwargs["filename"] == str(log_file)

def test_setup_logging_unknown_level_defaults_to_info(mocker):
    mock_basic = mocker.patch("logging.basicConfig")
    setup_logging("nonsense")
    assert mock_basic.call_args.kwargs["level"] == logging.INFO

def test_get_logger():
    assert get_logger("cmdshell.test") is logging.getLogger("cmdshell.test")

def test_setup_logging_sets_package_level(mocker):
    mocker.patch("logging.basicConfig")
    setup_logging("WARNING")
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING
