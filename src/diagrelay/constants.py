# topmark:header:start
#
#   project      : DiagRelay
#   file         : constants.py
#   file_relpath : src/diagrelay/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DIAGRELAY_VERSION: str = get_version("diagrelay")

# Environment variable consulted by `setup_logging()` when no level is given.
LOG_LEVEL_ENV_VAR: str = "DIAGRELAY_LOG_LEVEL"

# Config discovery: a dedicated file wins over `[tool.diagrelay]` in pyproject.toml.
CONFIG_FILE_NAME: str = "diagrelay.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "diagrelay"

# Header prefix used in rendered preambles ("Build Error", "Build Warning (dev)", ...).
DEFAULT_PRODUCT_NAME: str = "Build"

# Column width used when word-wrapping diagnostic text.
DEFAULT_TEXT_WIDTH: int = 77

# Indent unit applied to the diagnostic body and to call-stack frames.
TEXT_INDENT: str = "  "
