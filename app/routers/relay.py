import logging
import traceback
from typing import Optional

from fastapi import APIRouter, Body, Depends, Header, status
from fastapi.responses import JSONResponse

from app.dependencies import get_relay_service
from app.exceptions import RelayError, ValidationError
from app.schemas.relay import (
    RelayFailure,
    RelayRequest,
    RelayResult,
    UploadFileBody,
)
from app.services.relay_service import RelayService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["relay"])


@router.post("/upload-file", response_model=RelayResult)
def upload_file(
    body: Optional[UploadFileBody] = Body(None),
    authorization: Optional[str] = Header(None),
    subscription_key: Optional[str] = Header(None),
    target_url: Optional[str] = Header(None),
    service: RelayService = Depends(get_relay_service),
):
    """Download the file at fileUrl and forward it to the upload API."""
    if body is None:
        body = UploadFileBody()
    request = RelayRequest(
        **body.model_dump(),
        authorization=authorization,
        subscription_key=subscription_key,
        target_url=target_url,
    )

    try:
        return service.relay(request)
    except ValidationError as e:
        logger.info(f"Rejected upload request: {str(e)} (missing: {e.missing})")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e), "missing": e.missing},
        )
    except RelayError as e:
        logger.error(f"Error uploading file: {type(e).__name__}: {str(e)}")
        failure = RelayFailure(details=e.details())
    except Exception as e:
        logger.error(f"Error uploading file: {str(e)}")
        logger.error(f"Traceback: {traceback.format_exc()}")
        failure = RelayFailure(details={"message": str(e)})

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure.model_dump(),
    )
