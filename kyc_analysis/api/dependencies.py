"""FastAPI dependency providers."""
from typing import Callable

from kyc_analysis.domain.interfaces.face_analysis import FaceAnalysisClient
from kyc_analysis.services.aws.rekognition import RekognitionService


def get_face_analysis_client_factory() -> Callable[[], FaceAnalysisClient]:
    """Provide the factory building a face-analysis client per request.

    Returns:
        Callable creating a new RekognitionService
    """
    return RekognitionService
