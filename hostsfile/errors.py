"""
hosts 文件解析的异常类型
"""

from pathlib import Path
from typing import Union


class HostsError(Exception):
    """所有 hostsfile 异常的基类"""


class EntryParseError(HostsError):
    """单行条目不符合 hosts 语法"""


class InvalidAddressError(EntryParseError):
    """
    候选地址不是合法的 IPv4 或 IPv6 地址

    属性:
        token: 扫描得到的候选地址
        diagnostic: ipaddress 给出的诊断信息
    """

    def __init__(self, token: str, diagnostic: str):
        self.token = token
        self.diagnostic = diagnostic
        super().__init__(f"无法解析有效的 IP 地址 {token!r}: {diagnostic}")


class MissingSeparatorError(EntryParseError):
    """地址之后缺少空白分隔符"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"IP 地址 {token} 之后需要空白字符")


class MissingHostnameError(EntryParseError):
    """地址之后没有任何主机名"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"IP 地址 {token} 之后缺少主机名")


class HostsFileError(HostsError):
    """
    文件级别错误的基类

    属性:
        path: 出错的 hosts 文件路径（未知时为 None）
    """

    def __init__(self, message: str, path: Union[Path, str, None] = None):
        self.path = path
        super().__init__(message)


class HostsNotFoundError(HostsFileError):
    """hosts 文件不存在"""

    def __init__(self, path: Union[Path, str]):
        super().__init__(f"文件不存在: {path}", path)


class HostsNotAFileError(HostsFileError):
    """路径存在但不是普通文件"""

    def __init__(self, path: Union[Path, str]):
        super().__init__(f"不是普通文件: {path}", path)


class HostsOpenError(HostsFileError):
    """文件存在但无法打开"""

    def __init__(self, path: Union[Path, str], diagnostic: str):
        self.diagnostic = diagnostic
        super().__init__(f"无法打开文件 {path}: {diagnostic}", path)


class HostsReadError(HostsFileError):
    """读取某一行时发生 I/O 错误"""

    def __init__(self, line_number: int, diagnostic: str, path: Union[Path, str, None] = None):
        self.line_number = line_number
        self.diagnostic = diagnostic
        super().__init__(f"读取第 {line_number} 行时出错: {diagnostic}", path)


class LineParseError(HostsFileError):
    """
    带有文件位置信息的条目解析错误

    属性:
        reason: 原始的 EntryParseError
        line_number: 出错行号（从 1 开始）
        line: 去掉前导空白后的行内容
    """

    def __init__(
        self,
        reason: EntryParseError,
        line_number: int,
        line: str,
        path: Union[Path, str, None] = None,
    ):
        self.reason = reason
        self.line_number = line_number
        self.line = line
        super().__init__(f"第 {line_number} 行解析失败 ({reason}): {line!r}", path)


class LocateError(HostsError):
    """无法确定系统 hosts 文件的位置"""
