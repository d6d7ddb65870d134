# linum/core/__init__.py
# Pure numbering & formatting logic (no I/O)
