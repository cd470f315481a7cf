"""
Rekognition service for face detection and comparison using boto3.
"""
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from kyc_analysis.core.config import settings
from kyc_analysis.core.exceptions import FaceAnalysisError, RekognitionClientError
from kyc_analysis.core.logging import get_logger
from kyc_analysis.domain.entities.face import FaceComparisonResult, FaceDetail
from kyc_analysis.domain.interfaces.face_analysis import FaceAnalysisClient

logger = get_logger(__name__)

DEFAULT_ATTRIBUTES = ["DEFAULT"]


def s3_image(bucket: str, key: str) -> Dict[str, Any]:
    """Build a Rekognition Image reference to an S3 object."""
    return {"S3Object": {"Bucket": bucket, "Name": key}}


class RekognitionService(FaceAnalysisClient):
    """Service for interacting with AWS Rekognition.

    A new client is created for every instance; callers build one instance
    per invocation.
    """

    def __init__(
        self,
        region_name: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        session_token: Optional[str] = None,
        attributes: Optional[List[str]] = None,
        similarity_threshold: Optional[float] = None,
        client: Any = None,
    ):
        """
        Initialize the Rekognition client.

        Args:
            region_name: AWS region name (defaults to settings)
            access_key_id: AWS access key ID (defaults to settings)
            secret_access_key: AWS secret access key (defaults to settings)
            session_token: AWS session token (defaults to settings)
            attributes: DetectFaces attributes (defaults to settings)
            similarity_threshold: CompareFaces threshold (defaults to settings)
            client: Pre-built Rekognition client, used as is when given

        Raises:
            RekognitionClientError: If the client cannot be created
        """
        self.region_name = region_name or settings.REKOGNITION_REGION
        self.access_key_id = access_key_id or settings.AWS_ACCESS_KEY_ID
        self.secret_access_key = secret_access_key or settings.AWS_SECRET_ACCESS_KEY
        self.session_token = session_token or settings.AWS_SESSION_TOKEN
        self.attributes = attributes or settings.face_attributes
        self.similarity_threshold = (
            similarity_threshold if similarity_threshold is not None
            else settings.SIMILARITY_THRESHOLD
        )
        self.client = client if client is not None else self._create_client()

    def _create_client(self) -> Any:
        """Create a Rekognition client from a fresh boto3 session."""
        client_args: Dict[str, Any] = {"region_name": self.region_name}
        if self.access_key_id and self.secret_access_key:
            logger.debug("Using explicit AWS credentials from config")
            client_args["aws_access_key_id"] = self.access_key_id
            client_args["aws_secret_access_key"] = self.secret_access_key
            if self.session_token:
                client_args["aws_session_token"] = self.session_token
        else:
            logger.debug("Allowing boto3 to discover AWS credentials automatically")

        try:
            session = boto3.session.Session()
            client = session.client("rekognition", **client_args)
        except (BotoCoreError, ClientError, ValueError) as e:
            logger.warning("Failed to create Rekognition client",
                         region=self.region_name, error=str(e))
            raise RekognitionClientError(
                f"Rekognition client unavailable in region {self.region_name}: {e}",
                details={"region": self.region_name},
            ) from e

        logger.debug("Initialized Rekognition client", region=self.region_name)
        return client

    def detect_faces(self, bucket: str, key: str) -> List[FaceDetail]:
        """
        Detect faces in an image stored in S3.

        Args:
            bucket: S3 bucket name
            key: S3 object key

        Returns:
            Detected faces, in the order returned by Rekognition

        Raises:
            FaceAnalysisError: If the DetectFaces call fails
        """
        params: Dict[str, Any] = {"Image": s3_image(bucket, key)}
        if self.attributes != DEFAULT_ATTRIBUTES:
            params["Attributes"] = self.attributes

        try:
            response = self.client.detect_faces(**params)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            logger.warning("Rekognition DetectFaces failed",
                         bucket=bucket, key=key, error_code=error_code, error=str(e))
            raise FaceAnalysisError(
                f"DetectFaces failed for s3://{bucket}/{key}: {e}",
                details={"bucket": bucket, "key": key, "error_code": error_code},
            ) from e
        except BotoCoreError as e:
            logger.warning("Rekognition DetectFaces failed",
                         bucket=bucket, key=key, error=str(e))
            raise FaceAnalysisError(
                f"DetectFaces failed for s3://{bucket}/{key}: {e}",
                details={"bucket": bucket, "key": key},
            ) from e

        faces = [FaceDetail.model_validate(face) for face in response.get("FaceDetails") or []]
        logger.debug("Detected faces", bucket=bucket, key=key, num_faces=len(faces))
        return faces

    def compare_faces(
        self,
        source_bucket: str,
        source_key: str,
        target_bucket: str,
        target_key: str,
    ) -> FaceComparisonResult:
        """
        Compare the largest face of the source image with the faces of the target image.

        Args:
            source_bucket: S3 bucket of the source image
            source_key: S3 object key of the source image
            target_bucket: S3 bucket of the target image
            target_key: S3 object key of the target image

        Returns:
            The comparison output without transport metadata

        Raises:
            FaceAnalysisError: If the CompareFaces call fails
        """
        params: Dict[str, Any] = {
            "SourceImage": s3_image(source_bucket, source_key),
            "TargetImage": s3_image(target_bucket, target_key),
        }
        if self.similarity_threshold is not None:
            params["SimilarityThreshold"] = self.similarity_threshold

        details = {"source_key": source_key, "target_key": target_key}
        try:
            response = self.client.compare_faces(**params)
        except ClientError as e:
            details["error_code"] = e.response.get("Error", {}).get("Code")
            logger.warning("Rekognition CompareFaces failed", error=str(e), **details)
            raise FaceAnalysisError(f"CompareFaces failed: {e}", details=details) from e
        except BotoCoreError as e:
            logger.warning("Rekognition CompareFaces failed", error=str(e), **details)
            raise FaceAnalysisError(f"CompareFaces failed: {e}", details=details) from e

        output = {k: v for k, v in response.items() if k != "ResponseMetadata"}
        logger.debug("Compared faces",
                     matches=len(output.get("FaceMatches") or []), **details)
        return FaceComparisonResult.model_validate(output)
