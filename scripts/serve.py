"""Start the dev server.

Usage:
    python -m scripts.serve                  # word-list slugs, auto-reload
    python -m scripts.serve --pool           # serve slugs from the LLM-fed pool
    python -m scripts.serve --port 9000 --no-reload
"""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="Run the Cutelinks dev server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    parser.add_argument("--pool", action="store_true", help="Use the slug pool strategy")
    args = parser.parse_args()

    # The reloaded worker builds its own settings from the environment
    if args.pool:
        os.environ["SLUG_STRATEGY"] = "pool"
    os.environ.setdefault("BASE_URL", f"http://{args.host}:{args.port}")

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        timeout_graceful_shutdown=1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
