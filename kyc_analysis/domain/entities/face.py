"""Face analysis records returned by the remote face-analysis service.

Both records are pass-through values: field names follow Rekognition's
response shapes and nested structures are kept as received. Fields the
service adds later are preserved as extras.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FaceDetail(BaseModel):
    """Attributes of a single detected face.

    A record with no fields set is the zero value used when no face is found.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    AgeRange: Optional[Dict[str, Any]] = Field(None, description="Estimated age range")
    Beard: Optional[Dict[str, Any]] = Field(None, description="Whether the face has a beard")
    BoundingBox: Optional[Dict[str, float]] = Field(None, description="Face location in image (ratios)")
    Confidence: Optional[float] = Field(None, description="Detection confidence (0-100)")
    Emotions: Optional[List[Dict[str, Any]]] = Field(None, description="Detected emotions")
    EyeDirection: Optional[Dict[str, Any]] = Field(None, description="Gaze direction")
    Eyeglasses: Optional[Dict[str, Any]] = Field(None, description="Whether the face wears eyeglasses")
    EyesOpen: Optional[Dict[str, Any]] = Field(None, description="Whether the eyes are open")
    FaceOccluded: Optional[Dict[str, Any]] = Field(None, description="Whether the face is occluded")
    Gender: Optional[Dict[str, Any]] = Field(None, description="Predicted gender")
    Landmarks: Optional[List[Dict[str, Any]]] = Field(None, description="Facial landmarks")
    MouthOpen: Optional[Dict[str, Any]] = Field(None, description="Whether the mouth is open")
    Mustache: Optional[Dict[str, Any]] = Field(None, description="Whether the face has a mustache")
    Pose: Optional[Dict[str, float]] = Field(None, description="Head pitch, roll and yaw")
    Quality: Optional[Dict[str, float]] = Field(None, description="Brightness and sharpness")
    Smile: Optional[Dict[str, Any]] = Field(None, description="Whether the face is smiling")
    Sunglasses: Optional[Dict[str, Any]] = Field(None, description="Whether the face wears sunglasses")


class FaceComparisonResult(BaseModel):
    """Similarity data between the faces of a source and a target image."""
    model_config = ConfigDict(frozen=True, extra="allow")

    FaceMatches: Optional[List[Dict[str, Any]]] = Field(
        None, description="Target faces matching the source face, with similarity scores")
    UnmatchedFaces: Optional[List[Dict[str, Any]]] = Field(
        None, description="Target faces that did not match the source face")
    SourceImageFace: Optional[Dict[str, Any]] = Field(
        None, description="The face used from the source image")
    SourceImageOrientationCorrection: Optional[str] = Field(None)
    TargetImageOrientationCorrection: Optional[str] = Field(None)
