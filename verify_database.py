import asyncio
import os

from dotenv import load_dotenv
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from tracker.app.db.session import engine_options

# Load env vars manually or rely on pydantic later
load_dotenv(".env")

db_url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///tracker.db")

print(f"Testing connection to: {db_url}")

async def check_db():
    engine = create_async_engine(db_url, **engine_options(db_url))
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        print("✅ Connection Successful!")
        return 0
    except Exception as e:
        print(f"❌ Connection Failed: {e}")
        return 1
    finally:
        await engine.dispose()

if __name__ == "__main__":
    raise SystemExit(asyncio.run(check_db()))
