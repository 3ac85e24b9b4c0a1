"""
normalizer.py
-------------
Turns whatever the caller hands us (request payloads, database rows, None)
into the two records every layout strategy relies on.

Rules:
 - content that is not a mapping is treated as an empty mapping
 - every content field survives only if it is a str, otherwise ""
 - identity name falls back to "Student"; email and branch fall back to ""

Nothing in here raises.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Tuple

logger = logging.getLogger(__name__)

CONTENT_FIELDS = (
    "objective",
    "education",
    "skills",
    "languages",
    "experience",
    "projects",
    "certifications",
    "achievements",
    "references_info",
    "additional_info",
)

DEFAULT_NAME = "Student"
CONTACT_SEPARATOR = " • "


@dataclass(frozen=True)
class ResumeContent:
    objective: str = ""
    education: str = ""
    skills: str = ""
    languages: str = ""
    experience: str = ""
    projects: str = ""
    certifications: str = ""
    achievements: str = ""
    references_info: str = ""
    additional_info: str = ""

    def field(self, name: str) -> str:
        return getattr(self, name, "")

    def is_blank(self) -> bool:
        return not any(getattr(self, f.name).strip() for f in fields(self))


@dataclass(frozen=True)
class StudentIdentity:
    name: str = DEFAULT_NAME
    email: str = ""
    branch: str = ""

    def contact_line(self, separator: str = CONTACT_SEPARATOR) -> str:
        return separator.join(part for part in (self.email, self.branch) if part)


def _string_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def normalize_content(raw: Any) -> ResumeContent:
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("Invalid resume data format: %r", type(raw).__name__)
        raw = {}
    return ResumeContent(**{name: _string_or(raw.get(name), "") for name in CONTENT_FIELDS})


def normalize_identity(raw: Any) -> StudentIdentity:
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("Invalid student info format: %r", type(raw).__name__)
        raw = {}
    name = _string_or(raw.get("name"), DEFAULT_NAME)
    if not name.strip():
        name = DEFAULT_NAME
    return StudentIdentity(
        name=name,
        email=_string_or(raw.get("email"), ""),
        branch=_string_or(raw.get("branch"), ""),
    )


def normalize(raw_content: Any, raw_identity: Any) -> Tuple[ResumeContent, StudentIdentity]:
    """Validate and default both input records. Total over all inputs."""
    return normalize_content(raw_content), normalize_identity(raw_identity)
