# linum/config/__init__.py
# Settings loading for linum
