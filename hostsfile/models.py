"""
hostsfile 数据模型
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Tuple, Union

IPAddress = Union[IPv4Address, IPv6Address]


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目（一个非注释、非空行）

    属性:
        address: IPv4 或 IPv6 地址
        names: 映射到该地址的主机名，按文件中的顺序保存，至少一个
    """

    address: IPAddress
    names: Tuple[str, ...]

    @property
    def version(self) -> int:
        """地址族版本（4 或 6）"""
        return self.address.version

    @property
    def canonical_name(self) -> str:
        """第一个主机名，按惯例为规范名"""
        return self.names[0]

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<主机名> <主机名> ...

        返回:
            格式化的 hosts 文件行
        """
        return f"{self.address}\t{' '.join(self.names)}"

    def __str__(self) -> str:
        return f"{self.address} -> {', '.join(self.names)}"
