"""
Symbol table commands.
"""

import sys
import httpx
from morse.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("map", help="Symbol table management")
    map_sub = parser.add_subparsers(dest="map_command", required=True)
    
    # list
    list_p = map_sub.add_parser("list", help="List mappings")
    list_p.add_argument("--limit", type=int, help="Show only the first N mappings")
    list_p.set_defaults(func=map_list)
    
    # set
    set_p = map_sub.add_parser("set", help="Add or update a mapping")
    set_p.add_argument("char", help="Single character")
    set_p.add_argument("sequence", help="Morse sequence of '.' and '-'")
    set_p.set_defaults(func=map_set)
    
    # rm
    rm_p = map_sub.add_parser("rm", help="Remove a mapping")
    rm_p.add_argument("char", help="Single character")
    rm_p.set_defaults(func=map_rm)


def _require_char(char: str):
    if len(char) != 1:
        print("✗ Provide exactly one character.")
        sys.exit(1)


def _detail(e: httpx.HTTPStatusError) -> str:
    try:
        return str(e.response.json()["detail"])
    except (ValueError, KeyError):
        return str(e)


def map_list(args):
    try:
        result = client.list_mappings(args.limit)
        for m in result["mappings"]:
            print(f"  '{m['char']}' -> {m['sequence']}")
        print(f"Total mappings: {result['total']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def map_set(args):
    _require_char(args.char)
    try:
        result = client.put_mapping(args.char, args.sequence)
        print(f"✓ Mapping updated: '{result['char']}' -> {result['sequence']}")
    except httpx.HTTPStatusError as e:
        print(f"✗ Error: {_detail(e)}")
        sys.exit(1)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def map_rm(args):
    _require_char(args.char)
    try:
        result = client.remove_mapping(args.char)
        if result["removed"]:
            print(f"✓ Removed: '{result['char']}'")
        else:
            print("Mapping not found or protected.")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
