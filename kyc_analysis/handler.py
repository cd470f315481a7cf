"""AWS Lambda entry point for the KYC documents analysis service.

Invoked through an API Gateway proxy integration. The request body is
decoded into an ``ImageAnalysisRequest``; the analysis result is returned
as an API Gateway proxy response.
"""
import base64
import binascii
from typing import Any, Callable, Dict, Optional

import structlog
from pydantic import ValidationError

from kyc_analysis.core.exceptions import InvalidRequestError, KYCAnalysisError
from kyc_analysis.core.logging import get_logger, setup_logging
from kyc_analysis.domain.interfaces.face_analysis import FaceAnalysisClient
from kyc_analysis.domain.value_objects.analysis import ImageAnalysisRequest
from kyc_analysis.services.aws.rekognition import RekognitionService
from kyc_analysis.services.kyc_analysis import KYCAnalysisService, encode_response

setup_logging()
logger = get_logger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"
JSON_HEADERS = {"Content-Type": "application/json"}


def decode_request(body: Optional[str], is_base64_encoded: bool = False) -> ImageAnalysisRequest:
    """Decode a JSON request body into an analysis request.

    Raises:
        InvalidRequestError: If the body is neither null nor a JSON object of the expected shape
    """
    try:
        raw = body or ""
        if is_base64_encoded:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        if raw.strip() == "null":
            return ImageAnalysisRequest()
        return ImageAnalysisRequest.model_validate_json(raw)
    except (ValidationError, binascii.Error, UnicodeDecodeError) as e:
        raise InvalidRequestError(INVALID_REQUEST_BODY, details={"error": str(e)}) from e


def handle_request(
    body: Optional[str],
    is_base64_encoded: bool = False,
    client_factory: Optional[Callable[[], FaceAnalysisClient]] = None,
) -> Dict[str, Any]:
    """Run one analysis and build the HTTP-shaped response.

    Args:
        body: Raw request body
        is_base64_encoded: Whether the body is base64 encoded
        client_factory: Builds the face-analysis client, RekognitionService when omitted

    Returns:
        Dict with ``statusCode``, ``headers`` and ``body``:
        400 for a malformed body, 500 with an empty body for any remote or
        encoding failure, 200 with the JSON analysis response otherwise.
    """
    try:
        request = decode_request(body, is_base64_encoded)
    except InvalidRequestError as e:
        logger.info("Error decoding request body", error=e.details.get("error"))
        return {"statusCode": 400, "headers": {}, "body": INVALID_REQUEST_BODY}

    logger.info(
        "Analyzing KYC documents",
        bucket=request.bucket,
        selfie_image=request.selfie_image,
        document_image=request.document_image,
    )

    try:
        service = KYCAnalysisService(client_factory=client_factory or RekognitionService)
        response = service.analyze(request)
        payload = encode_response(response)
    except KYCAnalysisError as e:
        logger.error("KYC documents analysis failed",
                     error=str(e), details=e.details, exc_info=True)
        return {"statusCode": 500, "headers": {}, "body": ""}

    logger.info("KYC documents analysis completed")
    return {"statusCode": 200, "headers": dict(JSON_HEADERS), "body": payload}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for API Gateway proxy events.

    Args:
        event: API Gateway proxy request event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    structlog.contextvars.clear_contextvars()
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        structlog.contextvars.bind_contextvars(request_id=request_id)

    return handle_request(
        (event or {}).get("body"),
        is_base64_encoded=bool((event or {}).get("isBase64Encoded")),
    )
