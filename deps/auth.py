import os
from typing import Annotated

from fastapi import Header, HTTPException

# Load once at module import
ADMIN_TOKEN = os.getenv("ADMIN_TOKEN", "")
API_KEY = os.getenv("MATH_QUEST_API_KEY", "")


def require_client(
    x_api_key: Annotated[str | None, Header(alias="x-api-key")] = None,
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Guard for the answer-log endpoints. Accepts either:
      - X-Admin-Token that matches ADMIN_TOKEN, or
      - X-Api-Key that matches MATH_QUEST_API_KEY.
    """
    if ADMIN_TOKEN and x_admin_token == ADMIN_TOKEN:
        return

    if not API_KEY:
        raise HTTPException(status_code=500, detail="MATH_QUEST_API_KEY not configured on server.")
    if x_api_key != API_KEY:
        raise HTTPException(status_code=401, detail="Unauthorized.")
