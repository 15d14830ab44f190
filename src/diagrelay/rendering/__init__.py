# topmark:header:start
#
#   project      : DiagRelay
#   file         : __init__.py
#   file_relpath : src/diagrelay/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report rendering for DiagRelay.

Holds the message renderer, the rendered report model, the collaborator
protocols the renderer depends on and their shipped implementations
(backtrace, text formatter, program stack capture).
"""
