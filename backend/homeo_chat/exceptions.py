"""
Domain exceptions.

The HTTP layer maps these onto status codes in
:mod:`homeo_chat.middleware.error_handling`.
"""


class HomeoChatError(Exception):
    """Base class for all application errors."""


class MissingConfigurationError(HomeoChatError):
    """A required setting is absent; the service refuses to start."""


class CompletionError(HomeoChatError):
    """The completion API call failed or returned something unusable."""


class CompletionTimeoutError(CompletionError):
    """The completion API did not answer within the configured timeout."""


class StoreError(HomeoChatError):
    """A call to the conversation store failed."""


class DuplicateUserError(StoreError):
    """A user with the same email address already exists."""


class StoreNotConfiguredError(HomeoChatError):
    """A store-backed operation was requested but no store is wired in."""
