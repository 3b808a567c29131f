import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from app.dependencies import get_store
from app.schemas.store import NOT_FOUND_MESSAGE, RetrieveResponse, StoreResponse
from app.storage.memory_store import MemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["store"])


@router.post("/store", response_model=StoreResponse)
def store_body(payload: Any = Body(...), store: MemoryStore = Depends(get_store)):
    """Keep the request body in memory and return its generated id."""
    key = store.put(payload)
    logger.info(f"Stored body under {key}")
    return StoreResponse(id=key)


@router.get("/retrieve/{key}", response_model=RetrieveResponse)
def retrieve_body(key: str, store: MemoryStore = Depends(get_store)):
    content = store.get(key)
    if content is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": NOT_FOUND_MESSAGE},
        )
    return RetrieveResponse(id=key, data=content)
