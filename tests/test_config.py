import logging

import pytest

from m3u8codec import config


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("m3u8codec")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestConfig:

    def test_defaults(self):
        assert config.strict_numbering is False
        assert config.unknown_tag_policy in config.UNKNOWN_TAG_POLICIES

    def test_console_only(self, restore_logger):
        config.dictConfig()
        assert len(restore_logger.handlers) == 1
        assert restore_logger.level == logging.DEBUG

    def test_log_files(self, tmp_path, restore_logger):
        config.dictConfig(tmp_path)
        assert len(restore_logger.handlers) == 3
        logging.getLogger("m3u8codec.playlist").info("hello")
        for handler in restore_logger.handlers:
            handler.flush()
        assert "hello" in (tmp_path / "info.log").read_text()
        assert (tmp_path / "debug.log").exists()
