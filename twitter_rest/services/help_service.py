"""
Help and application status endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from twitter_rest.models import ApiModel, Configuration, Limits
from twitter_rest.services.base import ApiClient


class _PrivacyPolicy(ApiModel):
    privacy: str = ""


class _TermsOfService(ApiModel):
    tos: str = ""


@dataclass(slots=True)
class HelpService:
    client: ApiClient

    def configuration(self) -> Configuration:
        return self.client.call("GET", "help/configuration", None, Configuration)

    def privacy_policy(self) -> str:
        reply = self.client.call("GET", "help/privacy", None, _PrivacyPolicy)
        return reply.privacy

    def tos(self) -> str:
        reply = self.client.call("GET", "help/tos", None, _TermsOfService)
        return reply.tos

    def limits(self) -> Limits:
        """Current rate limits of the application, keyed by resource family."""

        return self.client.call("GET", "application/rate_limit_status", None, Limits)
