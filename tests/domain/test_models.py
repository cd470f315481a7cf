"""Tests for the KYC analysis value models."""
import json

import pytest
from pydantic import ValidationError

from conftest import COMPARISON, DOCUMENT_FACE, SELFIE_FACE
from kyc_analysis.domain.entities.face import FaceComparisonResult, FaceDetail
from kyc_analysis.domain.value_objects.analysis import (
    AnalysisResponse,
    AnalysisResult,
    ImageAnalysisRequest,
)


def test_request_decodes_camel_case_fields():
    request = ImageAnalysisRequest.model_validate_json(
        '{"bucket": "b", "selfieImage": "s.jpg", "documentImage": "d.jpg", "extra": true}'
    )

    assert request.bucket == "b"
    assert request.selfie_image == "s.jpg"
    assert request.document_image == "d.jpg"


def test_request_missing_fields_default_to_empty():
    request = ImageAnalysisRequest.model_validate_json("{}")

    assert (request.bucket, request.selfie_image, request.document_image) == ("", "", "")


def test_request_rejects_non_string_fields():
    with pytest.raises(ValidationError):
        ImageAnalysisRequest.model_validate_json('{"selfieImage": ["a.jpg"]}')


def test_face_detail_is_immutable():
    face = FaceDetail.model_validate(SELFIE_FACE)

    with pytest.raises(ValidationError):
        face.Confidence = 1.0


def test_face_detail_keeps_unknown_fields():
    """Should pass through attributes not modeled explicitly."""
    face = FaceDetail.model_validate({"Confidence": 99.0, "NewAttribute": {"Value": True}})

    assert face.model_dump(exclude_none=True) == {"Confidence": 99.0, "NewAttribute": {"Value": True}}


def test_records_compare_by_value():
    assert FaceDetail.model_validate(DOCUMENT_FACE) == FaceDetail.model_validate(dict(DOCUMENT_FACE))
    assert FaceDetail() != FaceDetail(Confidence=10.0)


def test_response_serializes_wire_names():
    response = AnalysisResponse(
        result=AnalysisResult(
            selfie_details=FaceDetail(),
            document_face_details=FaceDetail.model_validate(DOCUMENT_FACE),
            selfie_matches_document=FaceComparisonResult.model_validate(COMPARISON),
        )
    )

    assert json.loads(response.to_json()) == {
        "message": "KYC Documents Analysis Results",
        "result": {
            "selfieDetails": {},
            "documentFaceDetails": DOCUMENT_FACE,
            "selfieMatchesDocument": COMPARISON,
        },
    }


def test_request_keys_are_case_insensitive():
    request = ImageAnalysisRequest.model_validate_json(
        '{"Bucket": "b", "SelfieImage": "s.jpg", "DOCUMENTIMAGE": "d.jpg"}'
    )

    assert (request.bucket, request.selfie_image, request.document_image) == ("b", "s.jpg", "d.jpg")


def test_request_last_folded_key_wins():
    request = ImageAnalysisRequest.model_validate({"selfieImage": "first.jpg", "SELFIEIMAGE": "last.jpg"})

    assert request.selfie_image == "last.jpg"


def test_request_from_none_is_empty():
    assert ImageAnalysisRequest.model_validate(None) == ImageAnalysisRequest()
