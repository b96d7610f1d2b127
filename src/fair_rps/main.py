"""
公平石头剪刀布主程序入口
Fair Rock Paper Scissors Main Entry
"""
import sys
import argparse
from typing import Optional, Sequence

from .app import Application


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        prog='fair-rps',
        description='Rock Paper Scissors with any odd number of moves and a verifiable HMAC commitment',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fair-rps Rock Paper Scissors
  fair-rps Rock Paper Scissors Lizard Spock
  fair-rps --verify <HMAC key> Lizard <HMAC>
        """,
    )
    parser.add_argument(
        'moves',
        nargs='*',
        help='odd number (>= 3) of distinct move names, in dominance order'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='path to the YAML config file (default: config/config.yaml)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='override the log level from the config file'
    )
    parser.add_argument(
        '--verify',
        nargs=3,
        metavar=('KEY', 'MOVE', 'HMAC'),
        default=None,
        help='recompute the HMAC of MOVE with KEY and compare it with HMAC'
    )
    args = parser.parse_args(argv)

    if args.verify and args.moves:
        parser.error('--verify cannot be combined with moves')
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """主函数"""
    args = parse_args(argv)
    app = Application(config_path=args.config, log_level=args.log_level)

    if args.verify:
        return app.verify(*args.verify)
    return app.run(args.moves)


if __name__ == "__main__":
    sys.exit(main())
