"""
Remote Session Example - Talk to a running backend using settings.

Start the backend first:
    python -m profile_auth.server

Then:
    BACKEND_URL=http://localhost:3000 python examples/remote_session.py ada analytical-engine

The credential is kept in SESSION_STORE_PATH, so running the script again
restores the session without logging in.
"""

import asyncio
import logging
import sys

from profile_auth import create_session_controller
from profile_auth.adapters import CallbackNavigator


async def main(username: str, password: str):
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

    controller = create_session_controller(
        navigator=CallbackNavigator(lambda path: print(f"-> navigate {path}")),
    )

    async with controller:
        if controller.user:
            print(f"Restored session for {controller.user.full_name}")
            return

        error = await controller.login(username, password)
        if error:
            print(f"Login failed: {error}")
            return

        print(f"Logged in as {controller.user.full_name}")


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("usage: remote_session.py USERNAME PASSWORD")
        sys.exit(2)
    asyncio.run(main(sys.argv[1], sys.argv[2]))
