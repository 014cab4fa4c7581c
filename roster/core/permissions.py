from fastapi import Header

from roster.core import config
from roster.core.errors import Unauthorized


def require_token(authorization: str | None = Header(default=None)) -> None:
    # exact comparison, the header value is not parsed
    if not config.AUTH_TOKEN or authorization != config.AUTH_TOKEN:
        raise Unauthorized()
