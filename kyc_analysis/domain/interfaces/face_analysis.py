"""Face analysis client interface."""
from abc import ABC, abstractmethod
from typing import List

from ..entities.face import FaceComparisonResult, FaceDetail


class FaceAnalysisClient(ABC):
    """Interface for a remote face detection and comparison service.

    Images are referenced by (bucket, key); image bytes never pass through
    this interface.
    """

    @abstractmethod
    def detect_faces(self, bucket: str, key: str) -> List[FaceDetail]:
        """
        Detect faces in a stored image.

        Args:
            bucket: S3 bucket containing the image
            key: S3 object key of the image

        Returns:
            Detected faces in the order returned by the service, possibly empty

        Raises:
            FaceAnalysisError: If the remote call fails
        """
        pass

    @abstractmethod
    def compare_faces(
        self,
        source_bucket: str,
        source_key: str,
        target_bucket: str,
        target_key: str,
    ) -> FaceComparisonResult:
        """
        Compare the face of the source image with the faces of the target image.

        Raises:
            FaceAnalysisError: If the remote call fails
        """
        pass
