from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader

from db.crud.api_keys import get_active_api_key, touch_api_key
from db.session import get_db

API_KEY_HEADER = "x-api-key"
UNAUTHORIZED = {"error": "Unauthorized", "message": f"Invalid or missing {API_KEY_HEADER} header"}

# every write endpoint is key gated
GATED_METHODS = ("POST", "PUT", "PATCH", "DELETE")

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def require_api_key(key: str = Security(api_key_header), db=Depends(get_db)):
    """Gate for the write and back-office endpoints."""
    api_key = get_active_api_key(db, key)
    if not api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED)
    touch_api_key(db, api_key.id)
    return api_key


def rejects_api_key(req: Request) -> bool:
    """
    True when a write request carries no valid key.

    Request bodies are decoded before dependencies run, so a malformed body
    would otherwise be reported ahead of the missing key.
    """
    if req.method not in GATED_METHODS:
        return False
    sessions = req.app.dependency_overrides.get(get_db, get_db)()
    db = next(sessions)
    try:
        return get_active_api_key(db, req.headers.get(API_KEY_HEADER)) is None
    finally:
        sessions.close()
