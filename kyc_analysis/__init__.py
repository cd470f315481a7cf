"""KYC documents analysis: face detection and comparison of a selfie against an identity document."""

__version__ = "0.1.0"
