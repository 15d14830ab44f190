# topmark:header:start
#
#   project      : DiagRelay
#   file         : __init__.py
#   file_relpath : src/diagrelay/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification core: severity taxonomy, reclassification, visibility and dispatch."""
