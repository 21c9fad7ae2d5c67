"""Shared dependencies for API routes."""

from fastapi import HTTPException, Request

from config import settings


def check_payload_size(request: Request) -> None:
    """Reject bodies larger than the configured limit before parsing them."""
    length = request.headers.get("content-length")
    if length and length.isdigit() and int(length) > settings.max_payload_kb * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"Payload too large. Max size: {settings.max_payload_kb}KB",
        )
