from __future__ import annotations

import logging
from functools import wraps
from typing import Callable

from flask import g, jsonify, request

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DataAccessError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
    (DataAccessError, 500),
)


def ok(code: int = 200, **payload):
    return jsonify({"success": True, **payload}), code


def fail(message: str, code: int = 400, **extra):
    return jsonify({"success": False, "error": message, **extra}), code


def status_for(exc: DomainError) -> int:
    for error_cls, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return code
    return 400


def handle_errors(action: str) -> Callable:
    """Turn service exceptions into tagged failure payloads.

    Domain errors keep their message; anything else is logged and reported
    generically so the process keeps serving.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                logger.warning("Error %s: %s", action, e)
                return fail(str(e), status_for(e))
            except Exception:
                logger.exception("Unexpected error %s", action)
                return fail(f"System error while {action}", 500)

        return wrapper

    return decorator


def bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return ""
    return header.split(" ", 1)[1].strip()


def make_guards(auth_service):
    """Build ``login_required`` / ``admin_required`` bound to ``auth_service``."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            claims = auth_service.verify(bearer_token())
            if claims is None:
                return fail("Authentication required", 401)
            g.current_user = claims
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            claims = auth_service.verify(bearer_token())
            if claims is None:
                return fail("Authentication required", 401)
            if claims.get("role") != Role.ADMIN.value:
                return fail("Permission denied", 403)
            g.current_user = claims
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
