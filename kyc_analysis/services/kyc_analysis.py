"""KYC documents analysis: compares a selfie against the photo of an identity document."""
from contextlib import contextmanager
from typing import Callable, Iterator, Sequence, Type

from pydantic_core import PydanticSerializationError

from kyc_analysis.core.exceptions import (
    FaceAnalysisError,
    KYCAnalysisError,
    RekognitionClientError,
    ResponseEncodingError,
)
from kyc_analysis.core.logging import get_logger
from kyc_analysis.domain.entities.face import FaceDetail
from kyc_analysis.domain.interfaces.face_analysis import FaceAnalysisClient
from kyc_analysis.domain.value_objects.analysis import (
    AnalysisResponse,
    AnalysisResult,
    ImageAnalysisRequest,
)
from kyc_analysis.services.aws.rekognition import RekognitionService

logger = get_logger(__name__)


def first_or_default(faces: Sequence[FaceDetail]) -> FaceDetail:
    """Return the first detected face, or an empty record when none was found.

    Only one face per image is expected; any further faces are dropped.
    """
    if not faces:
        return FaceDetail()
    if len(faces) > 1:
        logger.debug("Multiple faces detected, keeping the first", num_faces=len(faces))
    return faces[0]


@contextmanager
def remote_step(
    step: str,
    message: str,
    error_cls: Type[KYCAnalysisError] = FaceAnalysisError,
) -> Iterator[None]:
    """Run a remote operation, re-raising any failure as ``error_cls``.

    The raised error carries ``message`` with the cause appended, the cause's
    details, and the failing ``step``. Logging is left to the caller.

    Example:
        ```python
        with remote_step("compare_faces", "Failed to compare faces"):
            result = client.compare_faces(...)
        ```
    """
    try:
        yield
    except Exception as e:
        details = dict(getattr(e, "details", {}) or {})
        details["step"] = step
        raise error_cls(f"{message}: {e}", details=details) from e


class KYCAnalysisService:
    """Service for analyzing a selfie and an identity document stored in S3.

    This service:
    1. Creates a face-analysis client for the invocation
    2. Detects the face in the selfie image
    3. Detects the face in the identity document image
    4. Compares the document face (source) with the selfie (target)

    Any failing step aborts the analysis; no partial result is returned.

    Example:
        ```python
        service = KYCAnalysisService()
        response = service.analyze(ImageAnalysisRequest(
            bucket="kyc-uploads",
            selfieImage="user-1/selfie.jpg",
            documentImage="user-1/passport.jpg",
        ))
        ```
    """

    def __init__(
        self,
        client_factory: Callable[[], FaceAnalysisClient] = RekognitionService,
    ) -> None:
        """Initialize the analysis service.

        Args:
            client_factory: Builds the face-analysis client; called once per analysis
        """
        self.client_factory = client_factory

    def analyze(self, request: ImageAnalysisRequest) -> AnalysisResponse:
        """Run the face analysis for both images.

        Args:
            request: Location of the selfie and document images

        Returns:
            AnalysisResponse with both face details and the comparison

        Raises:
            RekognitionClientError: If the client cannot be created
            FaceAnalysisError: If any remote call fails
        """
        with remote_step("create_client", "Failed to create Rekognition client",
                         RekognitionClientError):
            client = self.client_factory()

        with remote_step("detect_selfie_faces", "Failed to check selfie image"):
            selfie_faces = client.detect_faces(request.bucket, request.selfie_image)
        selfie_details = first_or_default(selfie_faces)
        logger.info("Checked selfie image", key=request.selfie_image,
                    num_faces=len(selfie_faces))

        with remote_step("detect_document_faces", "Failed to check identity document"):
            document_faces = client.detect_faces(request.bucket, request.document_image)
        document_face_details = first_or_default(document_faces)
        logger.info("Checked identity document", key=request.document_image,
                    num_faces=len(document_faces))

        # The document is the source image and the selfie the target
        with remote_step("compare_faces", "Failed to compare selfie with identity document"):
            comparison = client.compare_faces(
                request.bucket,
                request.document_image,
                request.bucket,
                request.selfie_image,
            )
        logger.info("Compared selfie with identity document",
                    matches=len(comparison.FaceMatches or []))

        return AnalysisResponse(
            result=AnalysisResult(
                selfie_details=selfie_details,
                document_face_details=document_face_details,
                selfie_matches_document=comparison,
            )
        )


def encode_response(response: AnalysisResponse) -> str:
    """Serialize an analysis response to JSON.

    Raises:
        ResponseEncodingError: If the response cannot be serialized
    """
    try:
        return response.to_json()
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise ResponseEncodingError(f"Failed to encode analysis response: {e}") from e
