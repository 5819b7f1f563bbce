import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Logging Configuration ---
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILENAME = "vending.log"

# --- Coin Denominations ---
# Label -> value in pence. Kept highest first; change is paid out in this order.
DENOMINATIONS = {
    "£2": 200,
    "£1": 100,
    "50p": 50,
    "20p": 20,
    "10p": 10,
    "5p": 5,
    "2p": 2,
    "1p": 1,
}

# --- Default Machine Load ---
# Item -> [available, restock level]
DEFAULT_INVENTORY = {
    "chocolate": [20, 200],
    "soda": [10, 100],
    "crisps": [15, 150],
}

# Item -> price in pence
DEFAULT_PRICES = {
    "chocolate": 200,
    "soda": 100,
    "crisps": 100,
}

DEFAULT_COINS = {
    "1p": 100,
    "2p": 100,
    "5p": 100,
    "10p": 100,
    "20p": 100,
    "50p": 100,
    "£1": 100,
    "£2": 100,
}

# How many best sellers the "top" report lists.
TOP_ITEMS_COUNT = 3
