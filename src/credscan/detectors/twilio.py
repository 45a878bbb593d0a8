# SPDX-License-Identifier: MIT
"""Twilio account SIDs (AC...) and API key SIDs (SK...)."""
from credscan.core.matching import word_bounded
from credscan.core.patterns import Alternative, PatternDefinition

SECRET_TYPE = "Twilio API Key"

PATTERN = PatternDefinition(
    Alternative(word_bounded("AC[a-z0-9]{32}"), description="account SID"),
    Alternative(word_bounded("SK[a-z0-9]{32}"), description="API key SID"),
)
