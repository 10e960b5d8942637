"""
单行 hosts 条目解析
"""

import ipaddress
from typing import List

from hostsfile.errors import (
    InvalidAddressError,
    MissingHostnameError,
    MissingSeparatorError,
)
from hostsfile.grammar import discard_ws, is_comment, scan_address
from hostsfile.models import HostEntry


def parse_entry(line: str) -> HostEntry:
    """
    将一行文本解析为 HostEntry

    调用方需保证该行不是空行或注释行。

    参数:
        line: 单行文本

    返回:
        解析得到的 HostEntry

    异常:
        InvalidAddressError: 候选地址不是合法的 IPv4/IPv6 地址
        MissingSeparatorError: 地址后紧跟非空白字符
        MissingHostnameError: 地址后没有主机名（可能只有注释）
    """
    pos = discard_ws(line)

    token, pos = scan_address(line, pos)
    try:
        address = ipaddress.ip_address(token)
    except ValueError as e:
        raise InvalidAddressError(token, str(e)) from e

    # 地址后直接到行尾，视为缺少主机名
    if pos == len(line):
        raise MissingHostnameError(token)

    after_ws = discard_ws(line, pos)
    if after_ws == pos:
        raise MissingSeparatorError(token)

    names: List[str] = []
    for name in line[after_ws:].split():
        if is_comment(name):
            break
        names.append(name)

    if not names:
        raise MissingHostnameError(token)

    return HostEntry(address=address, names=tuple(names))
