"""Application errors.

Every error carries a human readable message which is reported verbatim in the
GraphQL ``errors`` list. Nothing here is recovered from locally.
"""

from __future__ import annotations

from typing import ClassVar

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied


class StorefrontError(Exception):
    """Base class for errors raised by resolvers."""

    MSG: ClassVar[str] = "Something went wrong."

    def __init__(self, message: str | None = None):
        self.message = message if message is not None else self.MSG
        super().__init__(self.message)


class Unauthenticated(StorefrontError, PermissionDenied):
    MSG = "You must be logged in to do that!"


class Forbidden(StorefrontError, PermissionDenied):
    MSG = "You don't have permission to do that!"


class NotFound(StorefrontError, ObjectDoesNotExist):
    MSG = "Not found."


class InvalidCredentials(StorefrontError):
    MSG = "Invalid password"


class InvalidOrExpiredToken(StorefrontError):
    MSG = "This token is either invalid or expired!"


class PasswordMismatch(StorefrontError):
    MSG = "Your passwords do not match"


class PaymentFailed(StorefrontError):
    MSG = "The payment could not be completed."


class EmptyCart(StorefrontError):
    MSG = "Can't checkout an empty cart"


class InvalidInput(StorefrontError):
    MSG = "Invalid input."
