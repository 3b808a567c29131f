from typing import Any

from pydantic import BaseModel

STORE_SUCCESS_MESSAGE = "Body stored successfully!"
NOT_FOUND_MESSAGE = "Content not found for the given ID."


class StoreResponse(BaseModel):
    message: str = STORE_SUCCESS_MESSAGE
    id: str


class RetrieveResponse(BaseModel):
    id: str
    data: Any
