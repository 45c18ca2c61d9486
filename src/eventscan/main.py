"""Application entrypoint (internal FastAPI extraction service)."""

import asyncio
import sys

from .http_server import run_http_server
from .lifespan import lifespan_manager


async def main() -> None:
    """Main application entrypoint."""
    async with lifespan_manager():
        await run_http_server()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)
