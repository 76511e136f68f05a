"""
Database seeding script for demo parcels.

Creates a few parcels per client in different delivery stages.
Run this script after the database URL is configured.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from tracker.app.db.session import AsyncSessionLocal, engine, init_db
from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate
from tracker.app.services.parcel_store import ParcelStore

DEMO_PARCELS = [
    (1000, ParcelStatus.REGISTERED, "Pskov, Voennaya 30"),
    (1000, ParcelStatus.SENT, "Saratov, Vernaya 45"),
    (1000, ParcelStatus.DELIVERED, "Tula, Lesnaya 7"),
    (2000, ParcelStatus.REGISTERED, "Moscow, Ryabinovaya 12"),
    (3000, ParcelStatus.SENT, "Kazan, Baumana 3"),
]


async def seed_parcels(
    bind: AsyncEngine = engine,
    sessions: async_sessionmaker = AsyncSessionLocal,
) -> int:
    """
    Seed demo parcels unless the table already has rows.

    Returns:
        Number of parcels inserted (0 when seeding was skipped)
    """
    await init_db(bind)

    async with sessions() as db:
        print("🌱 Starting parcel seeding...")

        existing = (await db.execute(select(func.count(Parcel.number)))).scalar()
        if existing:
            print(f"ℹ️  {existing} parcels already exist, skipping seeding")
            return 0

        store = ParcelStore(db)
        for client, status, address in DEMO_PARCELS:
            number = await store.add(ParcelCreate(client=client, status=status, address=address))
            print(f"✅ Created parcel #{number} for client {client} ({status.value})")

        print(f"\n🎉 Seeded {len(DEMO_PARCELS)} parcels")
        return len(DEMO_PARCELS)


async def main():
    try:
        await seed_parcels()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
