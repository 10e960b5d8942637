"""
hostsfile 命令行入口

解析 hosts 文件并逐行输出解析结果。
"""

import sys
from typing import List, Optional

from hostsfile import Config, HostsError, HostsReader


def main(argv: Optional[List[str]] = None) -> None:
    """主入口点，可选参数为要解析的 hosts 文件路径"""
    args = sys.argv[1:] if argv is None else argv

    # 从环境变量加载配置，命令行参数优先
    config = Config.from_env()
    if args:
        config.hosts_file_path = args[0]

    try:
        reader = HostsReader(config)
    except (ValueError, HostsError) as e:
        print(f"初始化失败: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        entries = reader.run()
    except KeyboardInterrupt:
        reader.logger.info("被用户中断")
        sys.exit(130)
    except HostsError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    for entry in entries:
        print(entry.to_hosts_line())
