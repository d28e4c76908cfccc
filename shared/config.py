import os

from dotenv import load_dotenv

load_dotenv()

# dd/MM/yyyy, the "today" that closes the trailing window
ANCHOR_DATE = os.environ.get("HOT_PRODUCTS_ANCHOR_DATE", "21/07/2021")
UNKNOWN_PRODUCT_NAME = os.environ.get("HOT_PRODUCTS_UNKNOWN_NAME", "Unknown")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
