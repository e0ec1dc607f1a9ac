#!/usr/bin/env python3
"""
Standalone script to create a superuser for the Pay My Buddy API
Usage: python create_superuser.py
"""

import asyncio
from paymybuddy.core.database import AsyncSessionLocal, engine
from paymybuddy.core.exceptions import PayMyBuddyError
from paymybuddy.core.security import get_password_hasher
from paymybuddy.crud.user import UserRepository
from paymybuddy.services.user_service import UserService

async def create_superuser():
    print("Creating superuser...")

    email = input("Enter superuser email: ").strip()
    password = input("Enter superuser password: ")
    first_name = input("Enter first name (optional): ") or None
    last_name = input("Enter last name (optional): ") or None

    async with AsyncSessionLocal() as session:
        user_repository = UserRepository(session)
        user_service = UserService(user_repository, get_password_hasher())
        try:
            superuser = await user_service.create_user(email, password, first_name, last_name)
            superuser.is_superuser = True
            superuser.is_verified = True
            superuser = await user_repository.save(superuser)
            print("✅ Superuser created successfully!")
            print(f"📧 Email: {superuser.email}")
            print(f"🔑 ID: {superuser.id}")
        except PayMyBuddyError as e:
            print(f"❌ {e.message}")
        finally:
            await engine.dispose()

if __name__ == "__main__":
    asyncio.run(create_superuser())
