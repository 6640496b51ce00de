#!/usr/bin/env python3
"""
Query Users Script

Lists the registered users and the logged-in user from the local store.
Pass --csv to also export the users (without passwords) to data/csvs/users.csv.
"""

import csv
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import DatabaseStorage
from webapp.services.user_store import UserRepository

CSV_COLUMNS = ['name', 'email', 'phone', 'createdAt']

def show_all_users(repository):
    """Show every registered user."""
    print("👥 Registered Users:")
    print("=" * 50)

    users = repository.list_users()
    if not users:
        print("No users registered.")
        return users

    for user in users:
        print(f"Name: {user.get('name')}")
        print(f"Email: {user.get('email')}")
        print(f"Phone: {user.get('phone') or '-'}")
        print(f"Created: {user.get('createdAt')}")
        print("-" * 30)
    return users

def show_logged_user(repository):
    user = repository.get_logged_user()
    if user:
        print(f"\n🔓 Logged in: {user.get('email')}")
    else:
        print("\n🔒 Nobody is logged in.")

def export_users_to_csv(users, output_dir):
    """Write users to users.csv, leaving the password column out."""
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / "users.csv"

    with open(csv_path, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=CSV_COLUMNS, extrasaction='ignore')
        writer.writeheader()
        for user in users:
            writer.writerow(user)

    print(f"✅ Exported {len(users)} users to {csv_path}")
    return csv_path

def main():
    """Main function."""
    print("📊 User Store Query Tool")
    print("=" * 40)

    storage = DatabaseStorage()
    storage.init_database()
    repository = UserRepository(storage)

    users = show_all_users(repository)
    show_logged_user(repository)

    if '--csv' in sys.argv[1:]:
        export_users_to_csv(users, Path(__file__).parent.parent / "data" / "csvs")
    return 0

if __name__ == "__main__":
    sys.exit(main())
