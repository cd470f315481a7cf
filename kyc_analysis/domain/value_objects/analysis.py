"""KYC analysis value objects."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from kyc_analysis.domain.entities.face import FaceComparisonResult, FaceDetail

ANALYSIS_MESSAGE = "KYC Documents Analysis Results"

# Request keys match these wire names regardless of case
REQUEST_KEYS = {
    "bucket": "bucket",
    "selfieimage": "selfieImage",
    "documentimage": "documentImage",
}


class ImageAnalysisRequest(BaseModel):
    """Location of the selfie and identity document images to analyze.

    Missing fields decode as empty strings and a JSON ``null`` body decodes
    as a request with every field empty; both are sent to the face-analysis
    service as given. Keys are matched case-insensitively; when several keys
    fold onto the same field the last one wins.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    bucket: StrictStr = Field("", description="S3 bucket containing both images")
    selfie_image: StrictStr = Field("", alias="selfieImage", description="S3 object key of the selfie")
    document_image: StrictStr = Field("", alias="documentImage",
                                      description="S3 object key of the identity document photo")

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        """Map request keys onto field aliases, ignoring case."""
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            name = REQUEST_KEYS.get(key.lower()) if isinstance(key, str) else None
            if name is not None:
                folded[name] = value
        return folded


class AnalysisResult(BaseModel):
    """Face details of both images and their comparison."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    selfie_details: FaceDetail = Field(..., alias="selfieDetails")
    document_face_details: FaceDetail = Field(..., alias="documentFaceDetails")
    selfie_matches_document: FaceComparisonResult = Field(..., alias="selfieMatchesDocument")


class AnalysisResponse(BaseModel):
    """Response body returned for a successful analysis."""
    model_config = ConfigDict(frozen=True)

    message: str = Field(ANALYSIS_MESSAGE, description="Human readable message")
    result: AnalysisResult

    def to_json(self) -> str:
        """Serialize to the wire format, omitting fields the service did not return."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
