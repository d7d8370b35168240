"""
Blog API - command line entry point.

    blogapi serve [--host HOST] [--port PORT] [--reload]
    blogapi token USER_ID
"""

from __future__ import annotations

import argparse

import uvicorn

from blogapi.auth.jwt import TokenCodec
from blogapi.config import get_settings


def serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "blogapi.api.app:create_app",
        factory=True,
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


def token(args: argparse.Namespace) -> None:
    """Print a bearer token for a user id, signed with the configured secret."""
    codec = TokenCodec.from_settings(get_settings())
    print(codec.issue(args.user_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogapi", description="Blog post API")
    commands = parser.add_subparsers(dest="command", required=True)

    serve_cmd = commands.add_parser("serve", help="Run the HTTP server")
    serve_cmd.add_argument("--host", default=None)
    serve_cmd.add_argument("--port", type=int, default=None)
    serve_cmd.add_argument("--reload", action="store_true")
    serve_cmd.set_defaults(func=serve)

    token_cmd = commands.add_parser("token", help="Issue an access token")
    token_cmd.add_argument("user_id")
    token_cmd.set_defaults(func=token)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
