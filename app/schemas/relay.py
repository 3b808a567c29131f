from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Metadata fields forwarded to the upload API, in form order.
FORM_FIELDS = (
    "documentType",
    "refId",
    "entityId",
    "entityName",
    "lobId",
    "documentName",
    "contextId",
    "BMPReff",
)

REQUIRED_BODY_FIELDS = (
    "fileUrl",
    "documentType",
    "refId",
    "entityId",
    "entityName",
    "lobId",
    "contextId",
    "BMPReff",
)

UPLOAD_SUCCESS_MESSAGE = "File uploaded successfully"
UPLOAD_FAILURE_MESSAGE = "Failed to upload file"


class UploadFileBody(BaseModel):
    """JSON body of an upload-file request.

    Every field is optional at the schema level so that missing values are
    reported as a 400 with the relay's own message rather than a 422.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    fileUrl: Optional[str] = None
    documentType: Optional[str] = None
    refId: Optional[str] = None
    entityId: Optional[str] = None
    entityName: Optional[str] = None
    lobId: Optional[str] = None
    documentName: Optional[str] = None
    contextId: Optional[str] = None
    BMPReff: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def booleans_as_text(cls, value):
        # false counts as an empty value, true is sent as "true"
        if isinstance(value, bool):
            return "true" if value else None
        return value


class RelayRequest(UploadFileBody):
    """Upload-file body plus the credentials taken from request headers."""

    authorization: Optional[str] = None
    subscription_key: Optional[str] = None
    target_url: Optional[str] = None

    def form_fields(self, document_name: str) -> Dict[str, str]:
        fields = {name: getattr(self, name) for name in FORM_FIELDS}
        fields["documentName"] = document_name
        return fields


class RelayResult(BaseModel):
    message: str = UPLOAD_SUCCESS_MESSAGE
    data: Any = None


class RelayFailure(BaseModel):
    error: str = UPLOAD_FAILURE_MESSAGE
    details: Dict[str, Any] = Field(default_factory=dict)
