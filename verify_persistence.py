"""
Persistence check: a parcel written through one engine must be readable
after the engine is disposed and a new one is opened on the same database.
"""

import asyncio
import os
import sys
import tempfile

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from tracker.app.core.exceptions import ParcelNotFoundError
from tracker.app.db.session import engine_options, init_db
from tracker.app.schemas.parcel import ParcelCreate
from tracker.app.services.parcel_store import ParcelStore


def open_engine(url):
    engine = create_async_engine(url, **engine_options(url))
    return engine, async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def run_verification(url):
    # 1. First run: create schema and write a parcel
    print("\n--- [Step 1] Writing parcel (Initial) ---")
    engine, sessions = open_engine(url)
    parcel = ParcelCreate(client=1000, address="persistence check")
    try:
        await init_db(engine)
        async with sessions() as db:
            number = await ParcelStore(db).add(parcel)
        print(f"✅ Parcel #{number} stored")
    finally:
        await engine.dispose()

    # 2. Second run: fresh engine, read it back
    print("\n--- [Step 2] Reopening database (Verification) ---")
    engine, sessions = open_engine(url)
    try:
        await init_db(engine)
        async with sessions() as db:
            store = ParcelStore(db)
            try:
                stored = await store.get(number)
            except ParcelNotFoundError:
                print(f"❌ Parcel #{number} missing after restart")
                return False

            if stored.model_dump(exclude={"number"}) != parcel.model_dump():
                print(f"❌ Parcel #{number} changed after restart: {stored}")
                return False
            print(f"✅ Parcel #{number} persisted: {stored}")

            # 3. Clean up
            await store.delete(number)
            print("\n--- [Step 3] Cleanup done ---")
    finally:
        await engine.dispose()
    return True


if __name__ == "__main__":
    if len(sys.argv) > 1:
        database_url = sys.argv[1]
    else:
        database_url = "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(), "tracker.db")
    print(f"Verifying persistence on: {database_url}")
    sys.exit(0 if asyncio.run(run_verification(database_url)) else 1)
