#!/usr/bin/env python3
"""Tailwind CSS dev server: compile, serve and live-reload on port 8080."""

import argparse
import logging
import os

from rich.logging import RichHandler

from app import create_app
from change_watcher import ChangeWatcher, compile_styles, start_watching
from notifications import NotificationChannel
from tailwind_compiler import COMPILER, CONFIG_FILE, STYLESHEET, TailwindCompiler
from terminal import show_banner, show_url

HOST = "0.0.0.0"
PORT = 8080

# Edits to this file are not treated as project changes
SELF_NAME = os.path.basename(__file__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tailwind CSS development server")
    parser.add_argument("--root", default=".", help="project directory to serve and watch")
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    parser.add_argument("--compiler", default=COMPILER, help="tailwind executable")
    parser.add_argument("--stylesheet", default=STYLESHEET, help="stylesheet source file")
    parser.add_argument("--config", default=CONFIG_FILE, help="tailwind config file")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    root = os.path.abspath(args.root)

    compiler = TailwindCompiler(
        executable=args.compiler,
        stylesheet=args.stylesheet,
        config_file=args.config,
        cwd=root,
    )
    channel = NotificationChannel()
    app = create_app(compiler, channel, root)

    show_banner()
    compile_styles(compiler, channel)

    observer = start_watching(ChangeWatcher(root, compiler, channel, SELF_NAME))
    show_url(args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, threaded=True, use_reloader=False)
    finally:
        observer.stop()
        observer.join()


if __name__ == "__main__":
    main()
