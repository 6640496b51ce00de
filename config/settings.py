"""
Configuration Management

Loads environment variables (optionally from a .env file) and exposes the
application defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Database configuration
DB_DIR = Path(__file__).parent.parent / "data"
DB_PATH = DB_DIR / "signup_demo.db"

DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")

# Storage keys, shared with the original browser-side store layout
USER_STORE_KEY = "fake_users_v1"
LOGGED_USER_KEY = "loggedUser"
