"""
Development server entry point.

    python -m employee_service api --port 5284
    python -m employee_service bff --port 5000
"""

import argparse

import uvicorn

from employee_service.config import settings

# tier -> (import string, is an app factory)
TARGETS = {
    "api": ("employee_service.main:app", False),
    "bff": ("employee_service.main:create_bff_application", True),
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="employee-service",
        description="Run the Employee API or its BFF with uvicorn.",
    )
    parser.add_argument("tier", choices=sorted(TARGETS), nargs="?", default="api")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args(argv)

    port = args.port or (5284 if args.tier == "api" else 5000)

    target, factory = TARGETS[args.tier]
    uvicorn.run(
        target,
        factory=factory,
        host=args.host,
        port=port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
