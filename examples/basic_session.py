"""
Basic Session Example - Register, log in, reload and log out in-process.

Runs the reference backend inside the same process through httpx's ASGI
transport, so no server needs to be started.
"""

import asyncio

import httpx

from profile_auth import SessionController
from profile_auth.adapters import (
    HttpIdentityService,
    MemorySessionStore,
    RecordingNavigator,
)
from profile_auth.server import create_app


async def main():
    app = create_app()
    store = MemorySessionStore()

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://backend",
    ) as client:
        navigator = RecordingNavigator()
        controller = SessionController(
            identity=HttpIdentityService(client=client),
            store=store,
            navigator=navigator,
        )
        controller.subscribe(
            lambda event: print(f"  [{event.previous_state.value} -> {event.state.value}] {event.reason}")
        )

        await controller.start()
        print(f"Started: user={controller.user}")

        # Register (does not log in)
        error = await controller.register({
            "username": "ada",
            "password": "analytical-engine",
            "firstname": "Ada",
            "lastname": "Lovelace",
            "email": "ada@example.com",
        })
        print(f"\nRegister: error={error} view={navigator.current}")

        # Wrong password
        error = await controller.login("ada", "difference-engine")
        print(f"\nLogin with wrong password: {error}")

        # Login
        error = await controller.login("ada", "analytical-engine")
        print(f"\nLogin: error={error} view={navigator.current}")
        print(f"User: {controller.user.full_name} <{controller.user.get('email')}>")

        # Reload: a new controller over the same store
        reloaded = SessionController(
            identity=HttpIdentityService(client=client),
            store=store,
            navigator=RecordingNavigator(),
        )
        await reloaded.start()
        print(f"\nAfter reload: user={reloaded.user.full_name if reloaded.user else None}")

        # Logout
        reloaded.logout()
        print(f"\nLogged out: user={reloaded.user} credential stored={store.get() is not None}")


if __name__ == "__main__":
    asyncio.run(main())
