"""
Parcel Tracker entry point.

Runs a short delivery walkthrough against the configured database:
    python -m tracker.app.main
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from tracker.app.core.config import settings
from tracker.app.core.observability import configure_logging
from tracker.app.db.session import AsyncSessionLocal, engine, init_db
from tracker.app.services.parcel_service import ParcelService
from tracker.app.services.parcel_store import ParcelStore

DEMO_CLIENT = 1


async def run_demo(
    client: int = DEMO_CLIENT,
    bind: AsyncEngine = engine,
    sessions: async_sessionmaker = AsyncSessionLocal,
) -> None:
    """
    Walk one parcel through its lifecycle, then register and delete another.
    """
    logger = configure_logging(settings.log_level)
    logger.info("Starting %s against %s", settings.app_name, bind.url.render_as_string(hide_password=True))

    # Create tables on startup
    await init_db(bind)

    async with sessions() as db:
        service = ParcelService(ParcelStore(db))

        # 1. Register and list
        parcel = await service.register(client, "Pskov, Voennaya 30")
        await service.describe_client_parcels(client)

        # 2. Address can change while registered
        await service.change_address(parcel.number, "Saratov, Vernaya 45")

        # 3. Send, then try to change the address again (rejected)
        await service.next_status(parcel.number)
        await service.change_address(parcel.number, "Tula, Lesnaya 7")
        await service.describe_client_parcels(client)

        # 4. A second parcel is registered and removed
        extra = await service.register(client, "Moscow, Ryabinovaya 12")
        await service.describe_client_parcels(client)
        await service.delete(extra.number)
        await service.describe_client_parcels(client)


async def _main() -> None:
    try:
        await run_demo()
    finally:
        await engine.dispose()


def main() -> None:
    asyncio.run(_main())


if __name__ == "__main__":
    main()
