from __future__ import annotations


class DetectionError(Exception):
    """Base for everything detect_feeds can raise."""


class UrlResolutionError(DetectionError):
    def __init__(self, reference: str, cause: Exception):
        super().__init__(f"unable to resolve {reference!r}: {cause}")
        self.reference = reference
        self.cause = cause


class QueryError(DetectionError):
    def __init__(self, selector: str, cause: Exception):
        super().__init__(f"unable to select elements with {selector!r}: {cause}")
        self.selector = selector
        self.cause = cause
