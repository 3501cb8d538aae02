from .redaction import redact

__all__ = ["redact"]
