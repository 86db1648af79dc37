"""Auth service: registration, authentication and profile lookup.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

import bcrypt

from domain.model.errors import AuthError, ConflictError, NotFoundError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 12
# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or oversized input
        return False


def register(repo: UserRepository, name: str, email: str, password: str) -> User:
    """Register a new user.

    The pre-check gives a fast answer for the common case; the unique
    email index still decides when two signups race.

    Raises:
        ConflictError: email already registered
        ValidationError: password cannot be hashed
    """
    if repo.get_by_email(email):
        logger.info("Signup rejected: email already registered", extra={"email": email})
        raise ConflictError("User already exists")

    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError("Password is too long")

    user = repo.create(name=name, email=email, password_hash=hash_password(password))
    logger.info("User registered", extra={"userId": user.id, "email": email})
    return user


def authenticate(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Raises:
        NotFoundError: no user with that email
        AuthError: password does not match
    """
    user = repo.get_by_email(email)
    if not user:
        raise NotFoundError("User not found")

    if not user.password_hash or not verify_password(password, user.password_hash):
        logger.info("Login rejected: bad password", extra={"userId": user.id})
        raise AuthError("Invalid credentials")

    logger.info("User logged in", extra={"userId": user.id})
    return user


def get_profile(repo: UserRepository, user_id: str) -> User:
    """Load the user a verified token points at.

    Raises:
        NotFoundError: the user was removed after the token was issued
    """
    user = repo.get_by_id(user_id)
    if not user:
        logger.warning("Token references missing user", extra={"userId": user_id})
        raise NotFoundError("User not found")
    return user
