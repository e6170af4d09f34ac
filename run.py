"""Entry point for the student records server and console.

Modes:
    server   HTTP API and static front-end (default)
    console  interactive text menu only
    both     HTTP server in a background thread, console in the foreground,
             sharing one store

Usage:
    python run.py
    python run.py --mode both --port 9000
"""
import argparse
import logging
import threading

from uvicorn import Config, Server

from app.console import StudentConsole
from app.core.config import print_config, settings
from app.core.logging import setup_logging
from app.main import create_app
from app.services.student.student import StudentService

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Student records manager")
    parser.add_argument("--mode", choices=("server", "console", "both"), default="server")
    parser.add_argument("--host", default=None, help="overrides HOST")
    parser.add_argument("--port", type=int, default=None, help="overrides PORT")
    parser.add_argument("--static-dir", default=None, help="overrides STATIC_DIR")
    return parser.parse_args(argv)


def build_server(service: StudentService, args: argparse.Namespace) -> Server:
    overrides = {}
    if args.host:
        overrides["HOST"] = args.host
    if args.port:
        overrides["PORT"] = args.port
    if args.static_dir:
        overrides["STATIC_DIR"] = args.static_dir
    config = settings.model_copy(update=overrides)

    app = create_app(service, config)
    logger.info(f"Servidor rodando em http://localhost:{config.PORT}")
    return Server(Config(app=app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower()))


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(settings.LOG_LEVEL)
    if settings.DEBUG:
        print_config()

    service = StudentService()

    if args.mode == "console":
        StudentConsole(service).run()
        return

    server = build_server(service, args)
    if args.mode == "server":
        server.run()
        return

    thread = threading.Thread(target=server.run, name="http-server", daemon=True)
    thread.start()
    try:
        StudentConsole(service).run()
    finally:
        server.should_exit = True
        thread.join(timeout=5)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
