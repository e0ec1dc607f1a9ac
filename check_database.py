#!/usr/bin/env python3
"""
Smoke check: connect with the app's engine, confirm the Pay My Buddy tables
exist and report the Alembic revision.
Usage: python check_database.py
"""
import asyncio
import sys
from sqlalchemy import text
from paymybuddy.core.database import engine

EXPECTED_TABLES = {"users", "user_buddies", "transfers"}

async def check_database() -> bool:
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT current_database();"))
            print(f"✅ Connected to database: {result.scalar()}")

            result = await conn.execute(text("""
                SELECT table_name
                FROM information_schema.tables
                WHERE table_schema = 'public'
                ORDER BY table_name;
            """))
            tables = {row[0] for row in result.fetchall()}
            missing = EXPECTED_TABLES - tables
            for table in sorted(EXPECTED_TABLES & tables):
                print(f"   📋 {table}")
            if missing:
                print(f"❌ Missing tables: {', '.join(sorted(missing))}")

            if "alembic_version" in tables:
                result = await conn.execute(text("SELECT version_num FROM alembic_version;"))
                print(f"📌 Alembic revision: {result.scalar()}")
            else:
                print("⚠️  No alembic_version table, run: alembic upgrade head")

            return not missing
    except Exception as e:
        print(f"❌ Database check failed: {str(e)}")
        return False
    finally:
        await engine.dispose()

if __name__ == "__main__":
    ok = asyncio.run(check_database())
    sys.exit(0 if ok else 1)
