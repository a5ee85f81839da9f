# test_logger_setup.py

import json
import logging

import pytest

import constants
import logger_setup


@pytest.fixture
def app_logger():
    logger = logging.getLogger(constants.LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def write_config(path, **config):
    path.write_text(json.dumps(config))
    return str(path)


def test_setup_logging_writes_run_log(tmp_path, app_logger):
    config_path = write_config(
        tmp_path / "config.json",
        run_id="test_run",
        logging={"level": "DEBUG", "format": "%(levelname)s %(message)s"},
    )

    logger = logger_setup.setup_logging(config_path, log_root=str(tmp_path / "runs"))
    logger.debug("hello from the test")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "runs" / "test_run" / "simulation.log"
    assert "DEBUG hello from the test" in log_file.read_text()
    assert logger is app_logger
    assert logger.propagate is False
    assert len(logger.handlers) == 2


def test_console_can_be_disabled(tmp_path, app_logger):
    config_path = write_config(tmp_path / "config.json", run_id="quiet", logging={"console": False})

    logger = logger_setup.setup_logging(config_path, log_root=str(tmp_path))

    assert [type(h) for h in logger.handlers] == [logging.FileHandler]
    assert logger.level == logging.INFO


def test_repeated_setup_replaces_handlers(tmp_path, app_logger):
    config_path = write_config(tmp_path / "config.json", run_id="again", logging={})
    logger_setup.setup_logging(config_path, log_root=str(tmp_path))
    first_handlers = list(app_logger.handlers)

    logger_setup.setup_logging(config_path, log_root=str(tmp_path))

    assert len(app_logger.handlers) == 2
    assert not set(first_handlers) & set(app_logger.handlers)


def test_missing_run_id_gets_a_timestamp():
    assert logger_setup.resolve_run_id({'run_id': None}).startswith("run_")
    assert logger_setup.resolve_run_id({}).startswith("run_")
    assert logger_setup.resolve_run_id({'run_id': "named"}) == "named"
