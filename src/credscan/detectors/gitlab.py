# SPDX-License-Identifier: MIT
"""
GitLab tokens.

Each token family has its own prefix and length; all are reported as one
secret type.
"""
from credscan.core.matching import TOKEN_CHARS, one_of, token_bounded
from credscan.core.patterns import Alternative, PatternDefinition

SECRET_TYPE = "GitLab Token"

_BODY = f"[{TOKEN_CHARS}]"

PATTERN = PatternDefinition(
    Alternative(
        token_bounded(one_of("glpat", "gldt", "glft", "glsoat", "glrt") + f"-{_BODY}{{20,50}}"),
        description="personal, deploy, feed, service account and runner tokens",
    ),
    Alternative(
        token_bounded(f"GR1348941{_BODY}{{20,50}}"),
        description="legacy runner registration token",
    ),
    Alternative(
        token_bounded(f"glcbt-(?:[0-9a-fA-F]{{2}}_)?{_BODY}{{20,50}}"),
        description="CI/CD job token, optionally partitioned",
    ),
    Alternative(token_bounded(f"glimt-{_BODY}{{25}}"), description="incoming mail token"),
    Alternative(token_bounded(f"glptt-{_BODY}{{40}}"), description="pipeline trigger token"),
    Alternative(token_bounded(f"glagent-{_BODY}{{50,1024}}"), description="agent token"),
    Alternative(token_bounded(f"gloas-{_BODY}{{64}}"), description="OAuth application secret"),
)
