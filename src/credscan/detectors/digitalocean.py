# SPDX-License-Identifier: MIT
"""DigitalOcean personal access, OAuth and refresh tokens."""
from credscan.core.matching import one_of, word_bounded
from credscan.core.patterns import PatternDefinition

SECRET_TYPE = "DigitalOcean API Key"

# dop_v1_ (personal), doo_v1_ (OAuth), dor_v1_ (refresh) + 64 lowercase hex
PATTERN = PatternDefinition(
    word_bounded(one_of("dop", "doo", "dor") + "_v1_[a-f0-9]{64}"),
)
