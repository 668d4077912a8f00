"""Slack Block Kit formatting for rendered banners."""

from __future__ import annotations

import json
from typing import Any

from ..banner.models import BannerResult


def build_slack_message(result: BannerResult) -> dict[str, Any]:
    """
    One ``section`` block per banner line.

    Slack rejects empty text objects, so a blank line becomes a single space.
    """
    blocks = [
        {
            "type": "section",
            "text": {
                "type": "plain_text",
                "text": line or " ",
                "emoji": True,
            },
        }
        for line in result.lines
    ]
    return {"blocks": blocks}


def generate_slack_json(result: BannerResult) -> str:
    """Slack message as pretty-printed JSON; emoji are kept literal."""
    return json.dumps(build_slack_message(result), ensure_ascii=False, indent=2)
