"""
Basic usage - Master login, then a service token
"""
import asyncio
import getpass
import logging

from aiogpsoauth import GpsoauthClient, TokenRequestFailed, setup_logging


async def main():
    setup_logging(logging.INFO)
    logging.basicConfig(level=logging.INFO)

    email = input("Email: ")
    password = getpass.getpass("Password: ")
    android_id = "38c6ee9a82b8b10a"

    client = GpsoauthClient()
    try:
        master = await client.master_login(email, password, android_id)
        token = await client.oauth_exchange(
            email, master, android_id,
            service="oauth2:https://www.googleapis.com/auth/drive",
            app="com.google.android.apps.docs",
            client_sig="38918a453d07199354f8b19af05ec6562ced5788",
        )
    except TokenRequestFailed as e:
        print(f"Login failed: {e}")
        return

    print(f"Token expires at {token.expires_at.isoformat()}")


if __name__ == "__main__":
    asyncio.run(main())
