"""Request dependencies for caller identity and store access."""

from fastapi import Header, HTTPException, Request, status

from syncstore.store import MetadataStore


async def get_current_identity(x_identity: str = Header(...)) -> str:
    """
    FastAPI dependency returning the caller identity.

    The fronting platform authenticates the caller and forwards the
    verified identity in the X-Identity header.

    Raises:
        HTTPException: 401 if the header is blank
    """
    identity = x_identity.strip()
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing caller identity"
        )
    return identity


def get_store(request: Request) -> MetadataStore:
    return request.app.state.store
