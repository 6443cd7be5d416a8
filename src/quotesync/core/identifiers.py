"""Deterministic identifiers derived from author names."""

import re

IMAGE_ID_PREFIX = "avatar-"

_WHITESPACE_RUN = re.compile(r"\s+")


def derive_image_id(display_name: str) -> str:
    """
    Derive the image hosting identifier for an author.

    Lowercases the name and replaces each run of whitespace with a single
    hyphen, so "Maya Angelou", "maya   angelou" and "MAYA ANGELOU" all map to
    ``avatar-maya-angelou``.
    """
    return IMAGE_ID_PREFIX + _WHITESPACE_RUN.sub("-", display_name.lower())
