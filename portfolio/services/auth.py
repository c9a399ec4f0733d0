# portfolio/services/auth.py
import datetime
import functools
import logging
from typing import Optional, Dict, Any, List

import bcrypt
import jwt
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from ..models.user import User, RoleEnum
from ..schema.auth import LoginResponse
from ..stores.user_store import UserStore
from .errors import AuthenticationError

logger = logging.getLogger(__name__)

# ---- JWT config ----
JWT_ALGORITHM = "HS256"
DEFAULT_EXPIRES_HOURS = 24

# same message for unknown user and wrong password
INVALID_CREDENTIALS = "invalid username or password"

# ---- seed accounts ----
DEFAULT_USERS = (
    {
        "username": "admin",
        "password": "admin123",
        "email": "admin@portfolio.com",
        "role": RoleEnum.ADMIN,
    },
    {
        "username": "user",
        "password": "user123",
        "email": "user@portfolio.com",
        "role": RoleEnum.USER,
    },
)


@functools.lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # checked against when the username is unknown so both paths cost one hash
    return generate_password_hash("no-such-user")


def decode_token(token: Optional[str], secret: Optional[str]) -> Optional[Dict[str, Any]]:
    """Verify JWT token and return payload if valid."""
    try:
        if not token or not secret:
            return None
        if token.startswith("Bearer "):
            token = token[7:]
        return jwt.decode(
            token, secret, algorithms=[JWT_ALGORITHM], options={"require": ["exp", "sub"]}
        )
    except (jwt.ExpiredSignatureError, jwt.InvalidTokenError, AttributeError):
        return None


class AuthService:
    def __init__(
        self,
        session: Session,
        secret: Optional[str] = None,
        expires_hours: int = DEFAULT_EXPIRES_HOURS,
    ):
        self.users = UserStore(session)
        self.secret = secret
        self.expires_hours = expires_hours

    # ---------- password helpers ----------
    @staticmethod
    def hash_password(password: str) -> str:
        return generate_password_hash(password)

    @staticmethod
    def verify_password(hashed_password: str, password: str) -> bool:
        """
        Accept both Werkzeug ('scrypt:...', 'pbkdf2:sha256:...') and bcrypt
        ('$2b$...') hashes. Malformed hashes verify as False.
        """
        if not hashed_password or not password:
            return False
        if not isinstance(password, str) or not isinstance(hashed_password, str):
            return False
        try:
            if hashed_password.startswith("$2"):
                return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
            return check_password_hash(hashed_password, password)
        except ValueError:
            return False

    # ---------- JWT helpers ----------
    def generate_token(self, user: User) -> str:
        if not self.secret:
            raise RuntimeError("JWT_SECRET not configured")
        now = datetime.datetime.now(datetime.timezone.utc)
        payload = {
            "sub": user.username,
            "uid": user.id,
            "role": user.role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + datetime.timedelta(hours=self.expires_hours)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=JWT_ALGORITHM)

    def verify_token(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        return decode_token(token, self.secret)

    # ---------- user flows ----------
    def login(self, username: str, password: str) -> LoginResponse:
        """Check credentials and issue a session token."""
        if not isinstance(username, str) or not isinstance(password, str) \
                or not username or not password:
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = self.users.find_by_username(username)
        if user is None:
            self.verify_password(_dummy_hash(), password)
            logger.info("Login failed for %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)
        if not self.verify_password(user.password_hash, password):
            logger.info("Login failed for %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.generate_token(user)
        logger.info("User %r logged in", user.username)
        return LoginResponse.from_user(token, user)

    def initialize_default_users(self) -> List[str]:
        """
        Create the seed accounts that are missing. Existing accounts are left
        as they are (no password or role reset). Returns the usernames created.
        """
        created = []
        for account in DEFAULT_USERS:
            if self.users.exists_by_username(account["username"]):
                continue
            self.users.save(
                User(
                    username=account["username"],
                    password_hash=self.hash_password(account["password"]),
                    email=account["email"],
                    role=account["role"],
                    active=True,
                )
            )
            created.append(account["username"])
        return created
