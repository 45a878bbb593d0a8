# SPDX-License-Identifier: MIT
"""
NPM auth tokens in .npmrc files.

    //registry.npmjs.org/:_authToken=npm_xxxx
    //registry.npmjs.org/:_authToken=xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx

Only the token after ``_authToken=`` is reported.
"""
from credscan.core.matching import capture
from credscan.core.patterns import Alternative, PatternDefinition

SECRET_TYPE = "NPM Token"

# Path segments may not contain "/" so the registry part cannot run past
# the next "//" in URL-heavy text.
_ANCHOR = r"//[^\s/]+(?:/[^\s/]+)*/:_authToken=\s*"

PATTERN = PatternDefinition(
    Alternative(_ANCHOR + capture("npm_[A-Za-z0-9]+"), group="value", description="npm_ token"),
    Alternative(
        _ANCHOR + capture("[A-Fa-f0-9-]{36}") + "(?![A-Fa-f0-9-])",
        group="value",
        description="legacy UUID token",
    ),
)
