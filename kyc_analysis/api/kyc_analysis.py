"""KYC documents analysis API endpoints."""
from typing import Callable

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from kyc_analysis.api.dependencies import get_face_analysis_client_factory
from kyc_analysis.domain.interfaces.face_analysis import FaceAnalysisClient
from kyc_analysis.handler import handle_request

router = APIRouter(
    tags=["kyc"],
    responses={
        400: {"description": "Invalid request body"},
        500: {"description": "Face analysis failed"}
    }
)


@router.post(
    "/analyze",
    summary="Analyze a selfie against an identity document",
    description=(
        "Detects the face in both images stored in S3 and compares the "
        "identity document face with the selfie."
    ),
    responses={
        200: {
            "description": "Analysis completed",
            "content": {
                "application/json": {
                    "example": {
                        "message": "KYC Documents Analysis Results",
                        "result": {
                            "selfieDetails": {"Confidence": 99.9},
                            "documentFaceDetails": {"Confidence": 99.7},
                            "selfieMatchesDocument": {
                                "FaceMatches": [{"Similarity": 98.4}],
                                "UnmatchedFaces": []
                            }
                        }
                    }
                }
            },
        },
    },
)
async def analyze_documents(
    request: Request,
    client_factory: Callable[[], FaceAnalysisClient] = Depends(get_face_analysis_client_factory),
) -> Response:
    """Analyze a selfie and an identity document stored in S3.

    The raw body is decoded with the same rules as the Lambda handler, so
    malformed bodies get the plain-text 400 response rather than a 422.

    Args:
        request: Incoming request carrying the JSON body
        client_factory: Builds the face-analysis client for this request

    Returns:
        Response with the status, headers and body produced by the handler
    """
    body = (await request.body()).decode("utf-8", errors="replace")
    # boto3 calls are blocking
    result = await run_in_threadpool(handle_request, body, False, client_factory)
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
        media_type=None if result["headers"] else "text/plain",
    )
