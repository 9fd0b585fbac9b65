"""
Non-blocking usage - typed callbacks
"""
import asyncio

from aiogpsoauth import AuthTokenCallback, GpsoauthClient


class PrintCallback(AuthTokenCallback):
    def on_success(self, value):
        print(f"Got token, expires {value.expiry}")

    def on_failure(self, error):
        print(f"Failed: {error!r} (cause: {error.__cause__!r})")


async def main():
    client = GpsoauthClient()
    task = client.submit_login(
        "user@example.com", "password", "38c6ee9a82b8b10a",
        service="oauth2:https://www.googleapis.com/auth/drive",
        app="com.google.android.apps.docs",
        client_sig="38918a453d07199354f8b19af05ec6562ced5788",
        callback=PrintCallback(),
    )
    await asyncio.wait([task])


if __name__ == "__main__":
    asyncio.run(main())
