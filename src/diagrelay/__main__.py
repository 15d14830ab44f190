# topmark:header:start
#
#   project      : DiagRelay
#   file         : __main__.py
#   file_relpath : src/diagrelay/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DiagRelay via ``python -m diagrelay``.

Delegates to :func:`diagrelay.cli.main.cli`, the same entry point as the
``diagrelay`` console script.

Examples:
    Emit a developer warning using the module interface::

        python -m diagrelay emit --severity author_warning "Policy CMP0042 is not set."
"""

from __future__ import annotations

from diagrelay.cli.main import cli

if __name__ == "__main__":
    cli()
