# product_api/security.py
import hmac
import logging

from fastapi import Request

from .errors import Unauthorized, error_response

log = logging.getLogger(__name__)

API_KEY_NAME = "x-api-key"
PROTECTED_PREFIX = "/products"


def keys_match(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def is_protected(path: str) -> bool:
    return path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")


async def api_key_gate(request: Request, call_next):
    # Runs before routing, so unknown paths and methods under /products need the key too.
    if is_protected(request.url.path):
        api_key = request.headers.get(API_KEY_NAME)
        if not api_key or not keys_match(api_key, request.app.state.settings.api_key):
            log.warning("Auth fail on %s %s: %s x-api-key", request.method, request.url.path,
                        "missing" if not api_key else "wrong")
            return error_response(Unauthorized.status_code, Unauthorized.message)
    return await call_next(request)
