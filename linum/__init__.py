# linum/__init__.py
# Package metadata for the linum line numbering CLI

__version__ = "0.1.0"
