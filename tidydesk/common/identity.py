from functools import wraps
from flask import g
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from tidydesk.common.errors import UnauthorizedError
from tidydesk.common.utils import normalize_email


def current_owner_email() -> str:
    """Email vérifié de l'appelant (claim `sub` du jeton)."""
    email = getattr(g, "owner_email", None)
    if email:
        return email
    email = normalize_email(get_jwt_identity())
    if not email:
        raise UnauthorizedError("Invalid session subject.")
    return email


def owner_required(fn):
    """
    Ex: @bp.get("/")
        @owner_required
        def list_things(): ...

    Rejette l'appel (401) avant tout accès au stockage.
    """
    @wraps(fn)
    def inner(*args, **kwargs):
        verify_jwt_in_request()  # lève si non authentifié / token invalide
        g.owner_email = current_owner_email()
        return fn(*args, **kwargs)
    return inner
