#!/usr/bin/env python3
"""
Basic usage examples for Pusher client library.

Credentials are read from PUSHER_APP_ID, PUSHER_KEY and PUSHER_SECRET.
"""

import logging
import sys

from pusher_client import PusherClient, PusherClientError
from pusher_client.signer import canonical_string


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG)

    print("=== Pusher Client Basic Usage Examples ===\n")

    print("1. Creating Pusher client...")
    try:
        client = PusherClient.from_env()
    except PusherClientError as e:
        print(f"   ✗ {e}")
        return 1
    print(f"   Application: {client.credentials.app_id}\n")

    with client:
        try:
            print("2. Signing a request...")
            path = f"/apps/{client.credentials.app_id}/channels"
            params = client.signer.sign("GET", path)
            unsigned = {k: v for k, v in params.items() if k != "auth_signature"}
            print(f"   Signed string:\n{canonical_string('GET', path, unsigned)}")
            print(f"   Signature: {params['auth_signature']}\n")

            print("3. Triggering an event...")
            client.trigger("greeting", ["test-channel"], {"message": "Hello, Pusher!"})
            print("   ✓ Event triggered\n")

            print("4. Listing channels...")
            channels = client.get_channels_info(info=["user_count"])
            for name in channels.get("channels", {}):
                print(f"   - {name}")
            print()

            print("5. Listing users of a presence channel...")
            users = client.get_users_by_channel("presence-test")
            print(f"   Users: {users.get('users', [])}")
        except PusherClientError as e:
            print(f"   ✗ Request failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
