"""URL-safety preview schema.

Consumed by presentation code only; the scoring pipeline never reads it.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SecurityStatus(str, Enum):
    """Security verdict for a previewed URL."""

    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    DANGEROUS = "dangerous"
    UNKNOWN = "unknown"


class UrlPreview(BaseModel):
    """Preview metadata and security assessment for a URL."""

    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    security_status: SecurityStatus = SecurityStatus.UNKNOWN
    security_score: int = Field(0, ge=0, le=100)
    threat_types: Optional[list[str]] = None

    model_config = {"frozen": True}
