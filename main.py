#!/usr/bin/env python3
"""
hostsfile - 主入口点

解析 hosts 文件并逐行输出解析结果。
"""

from hostsfile.cli import main


if __name__ == '__main__':
    main()
