"""Transmission operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..mapping import freeze
from .base import APIResource


class Transmissions(APIResource):
    """Send email and inspect scheduled transmissions."""

    endpoint = "transmissions"

    parameter_mappings = freeze(
        {
            "attachments": "content.attachments",
            "campaign": "campaign_id",
            "customHeaders": "content.headers",
            "description": "description",
            "from": "content.from",
            "html": "content.html",
            "inlineCss": "options.inline_css",
            "inlineImages": "content.inline_images",
            "metadata": "metadata",
            "recipientList": "recipients.list_id",
            "recipients": "recipients",
            "replyTo": "content.reply_to",
            "returnPath": "return_path",
            "rfc822": "content.email_rfc822",
            "sandbox": "options.sandbox",
            "startTime": "options.start_time",
            "subject": "content.subject",
            "substitutionData": "substitution_data",
            "template": "content.template_id",
            "text": "content.text",
            "trackClicks": "options.click_tracking",
            "trackOpens": "options.open_tracking",
            "transactional": "options.transactional",
            "useDraftTemplate": "use_draft_template",
        }
    )

    structure = freeze(
        {
            "return_path": "default@sparkpostmail.com",
            "content": {
                "html": None,
                "text": None,
                "email_rfc822": None,
            },
            "use_draft_template": False,
        }
    )

    def send(self, transmission: Mapping[str, Any]) -> dict[str, Any]:
        """Send a transmission.

        Args:
            transmission: Caller-facing options such as ``from``, ``subject``,
                ``html``, ``recipients`` or ``template``. See
                ``parameter_mappings`` for every supported key.
        """
        config = dict(transmission)
        text = config.get("text")
        if isinstance(text, str):
            config["text"] = text.replace("\r\n", "\n")
        return self.create(config)

    def all(
        self,
        campaign_id: str | None = None,
        template_id: str | None = None,
    ) -> dict[str, Any]:
        """List transmissions, optionally filtered by campaign or template."""
        query: dict[str, str] = {}
        if campaign_id is not None:
            query["campaign_id"] = campaign_id
        if template_id is not None:
            query["template_id"] = template_id
        return self.get(None, query)

    def find(self, transmission_id: str) -> dict[str, Any]:
        return self.get(transmission_id)


__all__ = ["Transmissions"]
