"""Shared fixtures for the KYC documents analysis tests."""
import os
import threading
from typing import Dict, List, Optional

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from kyc_analysis.core.exceptions import FaceAnalysisError
from kyc_analysis.domain.entities.face import FaceComparisonResult, FaceDetail
from kyc_analysis.domain.interfaces.face_analysis import FaceAnalysisClient

BUCKET = "kyc-uploads"
SELFIE_KEY = "customers/42/selfie.jpg"
DOCUMENT_KEY = "customers/42/passport.jpg"

SELFIE_FACE = {
    "BoundingBox": {"Width": 0.41, "Height": 0.55, "Left": 0.29, "Top": 0.18},
    "Confidence": 99.98,
    "Pose": {"Roll": -1.2, "Yaw": 3.4, "Pitch": 5.6},
    "Quality": {"Brightness": 81.2, "Sharpness": 92.2},
}
DOCUMENT_FACE = {
    "BoundingBox": {"Width": 0.12, "Height": 0.2, "Left": 0.08, "Top": 0.31},
    "Confidence": 99.71,
    "Landmarks": [{"Type": "eyeLeft", "X": 0.11, "Y": 0.38}],
}
COMPARISON = {
    "SourceImageFace": {
        "BoundingBox": {"Width": 0.12, "Height": 0.2, "Left": 0.08, "Top": 0.31},
        "Confidence": 99.71,
    },
    "FaceMatches": [
        {
            "Similarity": 98.37,
            "Face": {
                "BoundingBox": {"Width": 0.41, "Height": 0.55, "Left": 0.29, "Top": 0.18},
                "Confidence": 99.98,
            },
        }
    ],
    "UnmatchedFaces": [],
}


class FakeFaceAnalysisClient(FaceAnalysisClient):
    """In-memory face-analysis client recording every call it receives."""

    def __init__(
        self,
        faces_by_key: Optional[Dict[str, List[dict]]] = None,
        comparison: Optional[dict] = None,
        fail_on: Optional[str] = None,
    ) -> None:
        self.faces_by_key = faces_by_key or {}
        self.comparison = comparison or {}
        self.fail_on = fail_on
        self.calls: List[tuple] = []

    def detect_faces(self, bucket: str, key: str) -> List[FaceDetail]:
        self.calls.append(("detect_faces", bucket, key))
        if self.fail_on == key:
            raise FaceAnalysisError(f"DetectFaces failed for s3://{bucket}/{key}",
                                    details={"error_code": "InvalidS3ObjectException"})
        return [FaceDetail.model_validate(f) for f in self.faces_by_key.get(key, [])]

    def compare_faces(
        self,
        source_bucket: str,
        source_key: str,
        target_bucket: str,
        target_key: str,
    ) -> FaceComparisonResult:
        self.calls.append(("compare_faces", source_bucket, source_key, target_bucket, target_key))
        if self.fail_on == "compare_faces":
            raise FaceAnalysisError("CompareFaces failed")
        return FaceComparisonResult.model_validate(self.comparison)


class CountingFactory:
    """Client factory counting how many clients were built."""

    def __init__(self, client: Optional[FaceAnalysisClient] = None, error: Optional[Exception] = None):
        self.client = client
        self.error = error
        self.count = 0
        self._lock = threading.Lock()

    def __call__(self) -> FaceAnalysisClient:
        with self._lock:
            self.count += 1
        if self.error is not None:
            raise self.error
        return self.client


@pytest.fixture
def fake_client() -> FakeFaceAnalysisClient:
    """Provide a client returning one face per image and a match."""
    return FakeFaceAnalysisClient(
        faces_by_key={SELFIE_KEY: [SELFIE_FACE], DOCUMENT_KEY: [DOCUMENT_FACE]},
        comparison=COMPARISON,
    )


@pytest.fixture
def client_factory(fake_client) -> CountingFactory:
    """Provide a factory handing out the fake client."""
    return CountingFactory(fake_client)


@pytest.fixture
def request_body() -> str:
    """Provide a well formed request body."""
    return (
        '{"bucket": "%s", "selfieImage": "%s", "documentImage": "%s"}'
        % (BUCKET, SELFIE_KEY, DOCUMENT_KEY)
    )
