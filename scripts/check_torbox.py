import asyncio
import os

from debridbox.shared.exceptions import AuthError, DebridError
from debridbox.torbox.client import TorboxClient

api_key = os.environ.get("DEBRIDBOX_TORBOX_API_KEY", "")
info_hash = os.environ.get("DEBRIDBOX_CHECK_HASH", "dd8255ecdc7ca55fb0bbf81323d87062db1f6d1c")
print(f"Checking TorBox cache for: {info_hash}")

try:
    data = asyncio.run(TorboxClient(api_key).check_cached([info_hash]))
    print(f"Cached: {bool(data)}")
except AuthError:
    print("AUTH REQUIRED (AuthError)")
except DebridError as e:
    print(f"ERROR: {e}")
