# SPDX-License-Identifier: MIT
"""Stripe live secret (sk_live_) and restricted (rk_live_) keys."""
from credscan.core.matching import token_bounded
from credscan.core.patterns import PatternDefinition

SECRET_TYPE = "Stripe Access Key"

PATTERN = PatternDefinition(
    token_bounded("[rs]k_live_[0-9a-zA-Z]{24}", alphabet="0-9a-zA-Z_"),
)
