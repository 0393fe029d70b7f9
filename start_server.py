"""
Todo API Launcher

Starts the HTTP JSON API server.

Usage:
    python start_server.py
    python start_server.py --port 8080
    python start_server.py --host 0.0.0.0 --store redis://localhost:6379/0
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def main():
    parser = argparse.ArgumentParser(description="Todo API server")
    parser.add_argument("--host", default=None, help="Host to bind (default: HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind (default: PORT or 5000)")
    parser.add_argument("--store", default=None,
                        help="Store URL, e.g. file://./data/todos or redis://localhost:6379/0 "
                             "(default: TODO_STORE_URL)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # Settings are read when web.server is imported, so export overrides first
    if args.store:
        os.environ["TODO_STORE_URL"] = args.store
    if args.port:
        os.environ["PORT"] = str(args.port)
    if args.host:
        os.environ["HOST"] = args.host

    from web.server import start_server

    start_server(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
