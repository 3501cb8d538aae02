from .homeopath_prompts import (
    HOMEOPATH_SYSTEM_PROMPT,
)

__all__ = [
    "HOMEOPATH_SYSTEM_PROMPT",
]
