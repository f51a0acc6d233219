"""
Configuration

All settings come from environment variables with defaults suitable for
local development.
"""

import os
from pathlib import Path

# Catalog source
CATALOG_API_URL = os.environ.get("CATALOG_API_URL", "https://fakestoreapi.com/products")
CATALOG_TIMEOUT = float(os.environ.get("CATALOG_TIMEOUT", "10.0"))

# Durable slot for the cart
CART_STORAGE_KEY = os.environ.get("CART_STORAGE_KEY", "online-store")
CART_STORAGE_DIR = Path(os.environ.get("CART_STORAGE_DIR", "data/storage"))

# Order handoff (wa.me style: {base}{phone}?text=...)
ORDER_HANDOFF_BASE_URL = os.environ.get("ORDER_HANDOFF_BASE_URL", "https://wa.me/")
ORDER_PHONE_NUMBER = os.environ.get("ORDER_PHONE_NUMBER", "+6281936020227")

# Seconds before the cart overlay closes after the cart becomes empty
CART_AUTO_CLOSE_DELAY = float(os.environ.get("CART_AUTO_CLOSE_DELAY", "0.3"))

# Display currency (single currency only)
DISPLAY_CURRENCY = "USD"
