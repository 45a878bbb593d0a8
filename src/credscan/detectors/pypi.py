# SPDX-License-Identifier: MIT
"""PyPI upload tokens for pypi.org and test.pypi.org."""
from credscan.core.matching import TOKEN_CHARS
from credscan.core.patterns import Alternative, PatternDefinition

SECRET_TYPE = "PyPI Token"

# The fixed part is the base64 macaroon header naming the index.
PATTERN = PatternDefinition(
    Alternative(
        f"(?<![{TOKEN_CHARS}])pypi-AgEIcHlwaS5vcmc[{TOKEN_CHARS}]{{70,}}",
        description="pypi.org",
    ),
    Alternative(
        f"(?<![{TOKEN_CHARS}])pypi-AgENdGVzdC5weXBpLm9yZw[{TOKEN_CHARS}]{{70,}}",
        description="test.pypi.org",
    ),
)
