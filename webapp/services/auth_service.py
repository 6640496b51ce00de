"""
Authentication Service

Field validation and the registration / login flows. Each flow runs its
checks in order and stops at the first failure, returning the message to
show next to the form.

Passwords are compared as plain text. This keeps parity with the demo store;
a real deployment would store and compare salted hashes instead.
"""

import re
import logging
from utils.timestamps import utc_now_iso

logger = logging.getLogger(__name__)

# Permissive check: something@something.something, no whitespace, one '@'
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 6

SIGNUP_NAME_REQUIRED = 'Please enter your full name.'
SIGNUP_EMAIL_INVALID = 'Please provide a valid email.'
SIGNUP_PASSWORD_TOO_SHORT = 'Password must be at least 6 characters.'
SIGNUP_PASSWORD_MISMATCH = 'Passwords do not match.'
SIGNUP_EMAIL_TAKEN = 'An account with this email already exists.'

LOGIN_EMAIL_INVALID = 'Please enter a valid email.'
LOGIN_PASSWORD_REQUIRED = 'Please enter your password (min 6 characters).'
LOGIN_UNKNOWN_EMAIL = 'No account found with this email.'
LOGIN_WRONG_PASSWORD = 'Incorrect password.'

SIGNUP_SUCCESS = 'Account created successfully. You will be redirected to the login page.'


def is_valid_email(email):
    """
    Check an email address against the permissive pattern.

    Args:
        email (str): Address to check

    Returns:
        bool: True if the lowercased address matches
    """
    return EMAIL_PATTERN.match(str(email).lower()) is not None


def is_valid_password(password):
    return bool(password) and len(password) >= MIN_PASSWORD_LENGTH


def validate_signup(name, email, password, confirm):
    """
    Validate the signup fields that do not need the store.

    Returns:
        str or None: Error message for the first failing check
    """
    if not name.strip():
        return SIGNUP_NAME_REQUIRED
    if not email or not is_valid_email(email):
        return SIGNUP_EMAIL_INVALID
    if len(password) < MIN_PASSWORD_LENGTH:
        return SIGNUP_PASSWORD_TOO_SHORT
    if password != confirm:
        return SIGNUP_PASSWORD_MISMATCH
    return None


def register_user(repository, name, email, phone, password, confirm):
    """
    Register a new user.

    Args:
        repository (UserRepository): Where users are stored
        name (str): Full name
        email (str): Email address, used as the case-insensitive identity
        phone (str): Phone number, may be empty
        password (str): Password, kept verbatim
        confirm (str): Password confirmation

    Returns:
        tuple: (user, error_message). Exactly one of them is None.
    """
    name = (name or '').strip()
    email = (email or '').strip()
    phone = (phone or '').strip()
    password = password or ''
    confirm = confirm or ''

    error = validate_signup(name, email, password, confirm)
    if error:
        return None, error

    if repository.find_user_by_email(email):
        logger.info(f"Signup rejected, email already registered: {email}")
        return None, SIGNUP_EMAIL_TAKEN

    user = {
        'name': name,
        'email': email,
        'phone': phone,
        'password': password,
        'createdAt': utc_now_iso(),
    }
    repository.append_user(user)
    logger.info(f"Registered user: {email}")
    return user, None


def authenticate_user(repository, email, password):
    """
    Check login credentials and record the session marker on success.

    Returns:
        tuple: (user, error_message). Exactly one of them is None.
    """
    email = (email or '').strip()
    password = password or ''

    if not email or not is_valid_email(email):
        return None, LOGIN_EMAIL_INVALID
    if not is_valid_password(password):
        return None, LOGIN_PASSWORD_REQUIRED

    user = repository.find_user_by_email(email)
    if not user:
        logger.info(f"Login failed, unknown email: {email}")
        return None, LOGIN_UNKNOWN_EMAIL

    if user.get('password') != password:
        logger.info(f"Login failed, wrong password for: {email}")
        return None, LOGIN_WRONG_PASSWORD

    repository.save_logged_user(user)
    logger.info(f"User logged in: {user.get('email')}")
    return user, None
