"""Run the host with uvicorn: ``python -m agenthost``."""

import argparse

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve agents and workflows over the OpenAI Responses API.")
    parser.add_argument("--host", default=None, help="Bind address (overrides config / AGENTHOST_HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (overrides config / AGENTHOST_PORT)")
    parser.add_argument("--log-level", default="info", help="uvicorn log level")
    args = parser.parse_args()

    from .main import SERVER_HOST, SERVER_PORT, app

    uvicorn.run(
        app,
        host=args.host or SERVER_HOST,
        port=args.port or SERVER_PORT,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
