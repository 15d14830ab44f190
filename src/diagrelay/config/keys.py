# topmark:header:start
#
#   project      : DiagRelay
#   file         : keys.py
#   file_relpath : src/diagrelay/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DiagRelay configuration.

Keys defined here represent the *external configuration API* as it appears in
``diagrelay.toml`` and in ``[tool.diagrelay]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DiagRelay configuration."""

    # [tool] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"

    # [warnings]
    SECTION_WARNINGS: Final[str] = "warnings"

    KEY_DEV_WARNINGS_AS_ERRORS: Final[str] = "dev_warnings_as_errors"
    KEY_DEPRECATED_WARNINGS_AS_ERRORS: Final[str] = "deprecated_warnings_as_errors"
    KEY_SUPPRESS_DEV_WARNINGS: Final[str] = "suppress_dev_warnings"
    KEY_SUPPRESS_DEPRECATED_WARNINGS: Final[str] = "suppress_deprecated_warnings"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_PRODUCT_NAME: Final[str] = "product_name"
    KEY_TEXT_WIDTH: Final[str] = "text_width"

    @classmethod
    def warning_keys(cls) -> tuple[str, ...]:
        """Return the keys accepted in the ``[warnings]`` table."""
        return (
            cls.KEY_DEV_WARNINGS_AS_ERRORS,
            cls.KEY_DEPRECATED_WARNINGS_AS_ERRORS,
            cls.KEY_SUPPRESS_DEV_WARNINGS,
            cls.KEY_SUPPRESS_DEPRECATED_WARNINGS,
        )

    @classmethod
    def output_keys(cls) -> tuple[str, ...]:
        """Return the keys accepted in the ``[output]`` table."""
        return (cls.KEY_PRODUCT_NAME, cls.KEY_TEXT_WIDTH)
