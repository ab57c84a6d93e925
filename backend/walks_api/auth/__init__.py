"""Auth module exports."""
from walks_api.auth.jwt import (
    verify_password,
    hash_password,
    create_access_token,
    decode_access_token,
    get_token_claims,
    RoleChecker,
    require_writer,
)

__all__ = [
    "verify_password",
    "hash_password",
    "create_access_token",
    "decode_access_token",
    "get_token_claims",
    "RoleChecker",
    "require_writer",
]
