"""Helpers shared across the test suite."""

from botocore.exceptions import ClientError


def make_client_error(status_code: int, code: str = "ValidationError", message: str = "error") -> ClientError:
    """Build a botocore ClientError carrying an HTTP status code."""
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"HTTPStatusCode": status_code},
        },
        "CompleteLifecycleAction",
    )
