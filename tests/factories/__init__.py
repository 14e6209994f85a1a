"""Test factories for generating request payloads."""

from tests.factories.registration import AddMemberRequestFactory, RegisterRequestFactory


__all__ = [
    "AddMemberRequestFactory",
    "RegisterRequestFactory",
]
