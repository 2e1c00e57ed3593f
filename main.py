#!/usr/bin/env python3
"""
Tally round-robin match results and print the standings table.

Usage:
    python main.py results.txt
    cat results.txt | python main.py
    python main.py --serve --port 8000

Each input line is "<team A>;<team B>;<outcome>" where outcome is
win, loss or draw relative to team A.
"""
import argparse
import sys

import uvicorn

from src.tournament import tally, TallyError


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Print a standings table from round-robin match results.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Input format (one match per line):
  Allegoric Alaskans;Blithering Badgers;win
  Devastating Donkeys;Courageous Californians;draw

Examples:
  python main.py results.txt
  python main.py - < results.txt
  python main.py --serve              # Web API on localhost:8000
  python main.py --serve --reload     # Auto-reload on code changes
'''
    )

    parser.add_argument(
        'file',
        nargs='?', default='-',
        help='File with match results (default: read from stdin)'
    )
    parser.add_argument(
        '--encoding',
        type=str, default='utf-8',
        help='Encoding of the input file (default: utf-8)'
    )
    parser.add_argument(
        '--serve',
        action='store_true',
        help='Serve the tally web API instead of reading match results'
    )
    parser.add_argument(
        '--host',
        type=str, default='127.0.0.1',
        help='Host to bind the web API to (default: 127.0.0.1)'
    )
    parser.add_argument(
        '--port',
        type=int, default=8000,
        help='Port to bind the web API to (default: 8000)'
    )
    parser.add_argument(
        '--reload',
        action='store_true',
        help='Enable auto-reload on code changes (with --serve)'
    )

    return parser.parse_args(argv)


def read_matches(path: str, encoding: str = 'utf-8') -> str:
    """Read raw match text from a file, or stdin when path is '-'."""
    if path == '-':
        return sys.stdin.read()
    with open(path, encoding=encoding, newline='') as f:
        return f.read()


def serve(host: str, port: int, reload: bool = False):
    """Run the tally web API with uvicorn."""
    print(f"Starting standings web server at http://{host}:{port}")
    print(f"Tally endpoint: POST http://{host}:{port}/api/tally")
    print(f"API documentation: http://{host}:{port}/docs")
    print()

    uvicorn.run(
        "src.web.app:app",
        host=host,
        port=port,
        reload=reload
    )


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.serve:
        serve(args.host, args.port, args.reload)
        return 0

    try:
        raw_text = read_matches(args.file, args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}")
        return 1

    try:
        table = tally(raw_text)
    except TallyError as e:
        print(f"Error: {e}")
        return 1

    print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
