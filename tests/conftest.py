"""共享的测试夹具"""

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_hostsfile_logger() -> Iterator[None]:
    """HostsReader 会给 'hostsfile' 日志记录器添加处理器，每个测试后清理"""
    yield
    logger = logging.getLogger("hostsfile")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
