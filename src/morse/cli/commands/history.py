"""
History commands.
"""

import sys
from datetime import datetime
from morse.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("history", help="Translation history")
    hist_sub = parser.add_subparsers(dest="history_command", required=True)
    
    list_p = hist_sub.add_parser("list", help="Show history")
    list_p.set_defaults(func=history_list)
    
    clear_p = hist_sub.add_parser("clear", help="Clear history")
    clear_p.set_defaults(func=history_clear)


def format_record(index: int, timestamp: datetime, mode: str, text: str, output: str) -> str:
    local = timestamp.astimezone().replace(tzinfo=None).isoformat(timespec="seconds")
    return f'{index}) [{local}] {mode} | "{text}" -> "{output}"'


def history_list(args):
    try:
        records = client.list_history()
        if not records:
            print("History empty.")
            return
        print("History:")
        for i, t in enumerate(records, 1):
            ts = datetime.fromisoformat(t["timestamp"])
            print(format_record(i, ts, t["mode"], t["input"], t["output"]))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def history_clear(args):
    try:
        result = client.clear_history()
        print(f"✓ History cleared ({result['cleared']} records).")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
