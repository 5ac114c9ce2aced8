"""Shared dependencies for API endpoints.

The embedding client is created once by the application lifespan and kept
on app.state. Routes receive it through get_embedding_client, which tests
replace via app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Request

from ldnexus.services.embedding_client import EmbeddingClient


def get_embedding_client(request: Request) -> EmbeddingClient:
    """Return the process-wide embedding client.

    If the lifespan has not run (e.g. the app is driven without startup
    events), an unavailable client is returned so matching falls back to
    the keyword heuristic.

    Args:
        request: HTTP request (injected by FastAPI).

    Returns:
        EmbeddingClient from app.state.
    """
    client = getattr(request.app.state, "embedding_client", None)
    if client is None:
        return EmbeddingClient(provider=None)
    return client


EmbeddingClientDep = Annotated[EmbeddingClient, Depends(get_embedding_client)]
