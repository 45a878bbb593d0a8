# SPDX-License-Identifier: MIT
"""Slack API tokens and incoming webhook URLs."""
from credscan.core.patterns import Alternative, PatternDefinition

SECRET_TYPE = "Slack Token"

PATTERN = PatternDefinition(
    Alternative(
        r"(?<![A-Za-z0-9_])xox[abposr]-(?:[0-9]+-)+[a-z0-9]+",
        description="bot, user, app and legacy tokens",
    ),
    Alternative(
        r"https://hooks\.slack\.com/services/T[a-zA-Z0-9_]+/B[a-zA-Z0-9_]+/[a-zA-Z0-9_]+",
        description="incoming webhook",
    ),
)
