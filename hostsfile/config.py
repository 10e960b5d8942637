"""
配置管理模块，支持环境变量
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """应用配置类，从环境变量加载配置"""

    hosts_file_path: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            HOSTS_FILE: 要解析的 hosts 文件路径 (默认: 系统 hosts 文件)
            LOG_LEVEL: 日志级别 (默认: INFO)
        """
        return cls(
            hosts_file_path=os.getenv("HOSTS_FILE") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
