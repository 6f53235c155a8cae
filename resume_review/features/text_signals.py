from __future__ import annotations

import re
from dataclasses import dataclass

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.IGNORECASE)
_PHONE_RE = re.compile(r"\b(?:\+\d{1,3}[-\s]?)?\(?\d{3}\)?[-\s]?\d{3}[-\s]?\d{4}\b", re.IGNORECASE)


@dataclass(frozen=True)
class ContactInfo:
    has_email: bool
    has_phone: bool

    @property
    def complete(self) -> bool:
        return self.has_email and self.has_phone

    @property
    def missing(self) -> bool:
        return not self.has_email and not self.has_phone


def is_blank(content: str) -> bool:
    return not content or not content.strip()


def count_words(content: str) -> int:
    return len(content.split())


def has_email(content: str) -> bool:
    return bool(_EMAIL_RE.search(content))


def has_phone(content: str) -> bool:
    return bool(_PHONE_RE.search(content))


def detect_contact_info(content: str) -> ContactInfo:
    return ContactInfo(has_email=has_email(content), has_phone=has_phone(content))
