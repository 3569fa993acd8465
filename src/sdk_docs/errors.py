from __future__ import annotations


class SdkDocsError(Exception):
    """Base class for errors raised while extracting SDK documentation."""


class SpecNotFoundError(SdkDocsError):
    def __init__(self, version: str, audience: str, filename: str) -> None:
        self.version = version
        self.audience = audience
        self.filename = filename

        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Spec not found for version {self.version} ({self.audience}): {self.filename}"


class InvalidSpecError(SdkDocsError):
    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        self.message = message

        super().__init__(f"Invalid spec {filename}: {message}")


class InvalidReferenceError(SdkDocsError, ValueError):
    def __init__(self, reference: object = None) -> None:
        self.reference = reference

        super().__init__("Invalid reference")


class SchemaNotFoundError(SdkDocsError, LookupError):
    def __init__(self, schema_id: str) -> None:
        self.schema_id = schema_id

        super().__init__("Schema doesn't exist")

    def __str__(self) -> str:
        return f"Schema doesn't exist: {self.schema_id}"
