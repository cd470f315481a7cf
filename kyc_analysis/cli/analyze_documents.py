"""CLI tool running a KYC documents analysis against images stored in S3."""
import argparse
import json
import sys
from typing import List, Optional

from kyc_analysis.core.logging import get_logger
from kyc_analysis.handler import handle_request

logger = get_logger(__name__)


def analyze_documents(bucket: str, selfie_image: str, document_image: str) -> int:
    """
    Analyze a selfie and an identity document and print the response body.

    Args:
        bucket: S3 bucket containing both images
        selfie_image: S3 object key of the selfie
        document_image: S3 object key of the identity document photo

    Returns:
        Process exit status: 0 on success, 1 otherwise
    """
    body = json.dumps({
        "bucket": bucket,
        "selfieImage": selfie_image,
        "documentImage": document_image,
    })
    result = handle_request(body)

    if result["statusCode"] != 200:
        logger.error("KYC documents analysis failed", status_code=result["statusCode"])
        return 1

    print(json.dumps(json.loads(result["body"]), indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Compare a selfie with an identity document stored in S3"
    )
    parser.add_argument("--bucket", required=True, help="S3 bucket containing both images")
    parser.add_argument("--selfie", required=True, help="S3 object key of the selfie")
    parser.add_argument("--document", required=True,
                        help="S3 object key of the identity document photo")
    args = parser.parse_args(argv)

    sys.exit(analyze_documents(args.bucket, args.selfie, args.document))


if __name__ == "__main__":
    main()
