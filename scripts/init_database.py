#!/usr/bin/env python3
"""
Database Initialization Script

Run this script to create the SQLite database and its local_storage table.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import DatabaseStorage
from config.settings import USER_STORE_KEY, LOGGED_USER_KEY

def main():
    """Initialize the database."""
    print("🚀 Initializing Signup Demo Database...")
    print("=" * 50)

    try:
        storage = DatabaseStorage()
        storage.init_database()
        print(f"✅ Database initialized: {storage.database_url}")

        print("\n📊 Storage keys:")
        print(f"   - {USER_STORE_KEY}: JSON array of registered users")
        print(f"   - {LOGGED_USER_KEY}: JSON record of the logged-in user")

        existing = storage.keys()
        if existing:
            print(f"\n🔑 Keys already present: {', '.join(existing)}")

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
