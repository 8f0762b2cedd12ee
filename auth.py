# auth.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Request
from jose import jwt, JOSEError
from passlib.context import CryptContext

from config import settings
from shopify_service import ShopifyService

pwd_context = CryptContext(schemes=["bcrypt", "pbkdf2_sha256"], deprecated="auto")

SESSION_COOKIE = "access_token_8002"
PUBLIC_PATHS = ["/login", "/login_page"]


def verify_admin(username: str, password: str) -> bool:
    if not settings.admin_password_hash or username != settings.admin_username:
        return False
    try:
        return pwd_context.verify(password, settings.admin_password_hash)
    except ValueError:
        # unrecognised hash format
        return False


def create_session_token(username: str) -> str:
    payload = {"sub": username, "exp": datetime.now(timezone.utc) + timedelta(days=1)}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm="HS256")


def read_session_user(token: Optional[str]) -> Optional[str]:
    """Return the username in a session token, or None when it is missing, expired or forged."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=["HS256"])
    except JOSEError:
        return None
    return payload.get("sub")


def authenticate_admin(request: Request) -> ShopifyService:
    """
    FastAPI dependency returning the admin GraphQL client for the configured shop.
    The login middleware has already rejected requests without a valid session.
    """
    return ShopifyService(
        store_url=settings.shop_url,
        token=settings.shop_token,
        api_version=settings.shopify_api_version,
        timeout=settings.request_timeout,
    )
