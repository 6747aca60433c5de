"""Error taxonomy for the composition pipeline.

Every failure a caller can see is a ReelComposeError carrying a short
machine-readable ``kind`` and a human-readable message. ``to_dict()``
gives the rejected outcome reported by the CLI.
"""


class ReelComposeError(Exception):
    kind = "error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class ValidationError(ReelComposeError, ValueError):
    """Malformed request field. Raised before any network call."""

    kind = "validation"

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class UnknownTemplate(ReelComposeError):
    kind = "unknown_template"

    def __init__(self, template_id: str, known: list[str]):
        self.template_id = template_id
        super().__init__(
            f"Unknown template '{template_id}'. Valid: {sorted(known)}"
        )


class UnknownSoundtrack(ReelComposeError):
    kind = "unknown_soundtrack"

    def __init__(self, key: str, template_id: str, known: list[str]):
        self.key = key
        self.template_id = template_id
        super().__init__(
            f"Template '{template_id}' has no soundtrack '{key}'. "
            f"Valid: {sorted(known)}"
        )


class InsufficientAssets(ReelComposeError):
    """The search returned fewer images than the template needs."""

    kind = "insufficient_assets"

    def __init__(self, query: str, required: int, available: int):
        self.query = query
        self.required = required
        self.available = available
        super().__init__(
            f"There are not enough images for '{query}' to create a video "
            f"(need {required}, found {available})"
        )


class LayoutError(ReelComposeError):
    """A computed schedule broke a timing invariant (template bug)."""

    kind = "layout"


class TransportError(ReelComposeError):
    """The search or render service call failed."""

    kind = "transport"
