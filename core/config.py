import os


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


# --- Shopify ---
SHOPIFY_STORE = env("SHOPIFY_STORE", "15c45d.myshopify.com")
SHOPIFY_ACCESS_TOKEN = env("SHOPIFY_ACCESS_TOKEN")
SHOPIFY_API_VERSION = env("SHOPIFY_API_VERSION", "2025-01")
SHOPIFY_LOCATION_ID = env("SHOPIFY_LOCATION_ID")  # fallback for fulfill_order
# unset = no timeout, requests waits as long as the socket does
SHOPIFY_TIMEOUT_SECONDS = float(env("SHOPIFY_TIMEOUT_SECONDS", "0")) or None

# --- Service ---
SERVICE_NAME = env("SERVICE_NAME", "shopify-order-management")
VERSION = env("VERSION", "1.0.0")
HOST = env("HOST", "0.0.0.0")
PORT = int(env("PORT", "3000"))
LOG_LEVEL = env("LOG_LEVEL", "INFO")
