# tests/utils/__init__.py
