"""
User Store

Mock user database kept as one JSON array in the local store, plus the
session marker of the logged-in user.

Records are plain dicts with the keys name, email, phone, password and
createdAt. Passwords are stored as entered (demo only).

append_user() is a read-modify-write without locking: two concurrent
registrations can lose one of the appends.
"""

import json
import logging
from config.settings import USER_STORE_KEY, LOGGED_USER_KEY

logger = logging.getLogger(__name__)


class UserRepository:
    """Reads and writes user records through a get_item/set_item store."""

    def __init__(self, storage, users_key=USER_STORE_KEY, logged_user_key=LOGGED_USER_KEY):
        self.storage = storage
        self.users_key = users_key
        self.logged_user_key = logged_user_key

    def list_users(self):
        """
        Load every registered user.

        Returns:
            list: User records in registration order. A missing, unreadable
                or non-list stored value gives an empty list.
        """
        raw = self.storage.get_item(self.users_key)
        if not raw:
            return []

        try:
            users = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable user collection under {self.users_key}: {e}")
            return []

        if not isinstance(users, list):
            logger.warning(f"Ignoring user collection under {self.users_key}: not a list")
            return []
        return users

    def append_user(self, user):
        """
        Add a user record to the end of the collection and save it.
        """
        users = self.list_users()
        users.append(user)
        self.storage.set_item(self.users_key, json.dumps(users))
        logger.info(f"Stored user {user.get('email')} ({len(users)} total)")

    def find_user_by_email(self, email):
        """
        Find a user by email, ignoring letter case.

        Returns:
            dict or None: The first matching record
        """
        wanted = email.lower()
        for user in self.list_users():
            if isinstance(user, dict) and str(user.get('email', '')).lower() == wanted:
                return user
        return None

    def save_logged_user(self, user):
        self.storage.set_item(self.logged_user_key, json.dumps(user))

    def get_logged_user(self):
        """Return the session marker record, or None if absent or unreadable."""
        raw = self.storage.get_item(self.logged_user_key)
        if not raw:
            return None

        try:
            user = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable session marker: {e}")
            return None
        return user if isinstance(user, dict) else None
