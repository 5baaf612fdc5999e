from __future__ import annotations

import argparse
import logging

import uvicorn

from checkers_server.app import create_app


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the Checkers rules backend.")
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="info", help="Log level for uvicorn and the engine.")
	parser.add_argument(
		"--no-settle",
		action="store_true",
		help="Accept input right after a move instead of waiting for /settled.",
	)
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	if args.reload:
		# reload needs an import string, so the settle flag keeps its default
		uvicorn.run(
			"checkers_server.app:app",
			host=args.host,
			port=args.port,
			reload=True,
			log_level=args.log_level,
		)
		return
	uvicorn.run(
		create_app(hold_input_until_settled=not args.no_settle),
		host=args.host,
		port=args.port,
		log_level=args.log_level,
	)


if __name__ == "__main__":
	main()
