from __future__ import annotations

import hmac
import logging
import secrets
import string
import time
from typing import Any

from persistence.errors import AuthFailure

logger = logging.getLogger(__name__)

ADMIN_PASSWORD_LENGTH = 39
TOKEN_PREFIX = "dvx_token_"
TOKEN_SUFFIX_LENGTH = 9
AUTH_FAILED_MESSAGE = "Неверный пароль"

_BASE36 = string.digits + string.ascii_lowercase


def issue_admin_token() -> str:
    """
    Opaque token: `dvx_token_<unix ms>_<9 base-36 chars>`.

    Tokens are not recorded anywhere; nothing validates them later.
    """
    suffix = "".join(secrets.choice(_BASE36) for _ in range(TOKEN_SUFFIX_LENGTH))
    return f"{TOKEN_PREFIX}{int(time.time() * 1000)}_{suffix}"


def authenticate(candidate: Any, secret: str) -> str:
    """
    Check the admin password and mint a token.

    Both the equality check and the fixed-length check must pass; the
    failure message never says which one did not.
    """
    if not isinstance(candidate, str):
        logger.info("Admin auth rejected: no password supplied")
        raise AuthFailure(AUTH_FAILED_MESSAGE)

    matches = hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))
    length_ok = len(candidate) == ADMIN_PASSWORD_LENGTH
    if not (matches and length_ok):
        logger.info("Admin auth rejected")
        raise AuthFailure(AUTH_FAILED_MESSAGE)

    logger.info("Admin auth succeeded")
    return issue_admin_token()
