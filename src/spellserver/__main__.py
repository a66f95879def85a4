from __future__ import annotations
import argparse
import logging
import sys
from spellcore import config as CFG
from spellcore.engine import Engine
from spellcore.errors import FatalStartup

log = logging.getLogger("spellserver")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Text Analysis Server (interactive spelling correction)")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--dictionary", default=None, help="Word-per-line dictionary file")
    src.add_argument("--db", default=None, help='Store DSN: "file:///path" or "memory://"')
    p.add_argument("--host", default=CFG.DEFAULT_HOST)
    p.add_argument("--port", type=int, default=CFG.DEFAULT_PORT, help="TCP port for client sessions")
    p.add_argument("--timeout", type=float, default=CFG.READ_TIMEOUT,
                   help="Seconds to wait for a client line (default: wait forever)")
    p.add_argument("--web", action="store_true", help="Serve the Flask API instead of raw TCP")
    p.add_argument("--web-port", type=int, default=CFG.DEFAULT_WEB_PORT)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    eng = Engine()
    try:
        eng.load(dictionary=args.dictionary, db_dsn=args.db, verbose=args.verbose)
        if args.web:
            from .web import run
            run(eng, host=args.host, port=args.web_port, debug=args.verbose)
        else:
            from .tcp import serve
            serve(eng, args.host, args.port, read_timeout=args.timeout)
        return 0
    except FatalStartup as e:
        log.error("%s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
