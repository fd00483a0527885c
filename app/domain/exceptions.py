from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class BillingError(DomainError):
    """Payment provider could not create the checkout session."""


class InvalidCheckoutRequestError(DomainError):
    """Checkout parameters out of the accepted range."""


class UserNotFoundError(DomainError):
    """Identity store has no user with the given id."""


class IdentityLookupError(DomainError):
    """Identity store could not be queried."""


class ProfileStoreError(DomainError):
    """Profile store read or write failed."""
