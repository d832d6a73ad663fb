"""
Encode / decode commands.
"""

import sys
from morse.cli import client


def add_subparser(subparsers):
    enc_p = subparsers.add_parser("encode", help="Encode text → Morse")
    enc_p.add_argument("text", help="Text to encode")
    enc_p.set_defaults(func=run_encode)
    
    dec_p = subparsers.add_parser("decode", help="Decode Morse → text")
    dec_p.add_argument("code", help="Morse tokens separated by spaces, '/' between words")
    dec_p.set_defaults(func=run_decode)


def run_encode(args):
    try:
        result = client.encode(args.text)
        print(f"Morse: {result['output']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def run_decode(args):
    try:
        result = client.decode(args.code)
        print(f"Text: {result['output']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
