"""
hostsfile 主应用模块
"""

import logging
import sys
from pathlib import Path
from typing import List

from hostsfile.config import Config
from hostsfile.file_parser import HostsFileParser
from hostsfile.locator import locate_system_hosts_file
from hostsfile.models import HostEntry


class HostsReader:
    """
    主应用控制器，协调配置、日志和解析器

    - 校验配置并配置日志
    - 确定要解析的 hosts 文件（配置优先，否则为系统 hosts 文件）
    - 解析文件并汇总结果
    """

    def __init__(self, config: Config):
        """
        初始化 HostsReader

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
            LocateError: 未配置路径且无法定位系统 hosts 文件
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

        if config.hosts_file_path:
            self.hosts_path = Path(config.hosts_file_path)
        else:
            self.hosts_path = locate_system_hosts_file()
            self.logger.debug(f"使用系统 hosts 文件: {self.hosts_path}")

        self.parser = HostsFileParser(self.hosts_path, self.logger)

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostsfile')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        # 标准输出留给解析结果，日志写到 stderr
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def run(self) -> List[HostEntry]:
        """
        解析 hosts 文件

        返回:
            HostEntry 对象列表

        异常:
            HostsError: 文件无法读取或包含语法错误
        """
        # 错误已由 HostsFileParser 记录
        entries = self.parser.parse()

        if entries:
            names_total = sum(len(entry.names) for entry in entries)
            self.logger.debug(f"共 {len(entries)} 个地址, {names_total} 个主机名")
        else:
            self.logger.info("没有找到主机条目")

        return entries
