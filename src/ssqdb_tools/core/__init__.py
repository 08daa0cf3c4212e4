"""Core domain package shared by the commit linter and the quote DB.

Core holds the message rules, quote parsing, and the immutable tool
configuration without any git or filesystem code, keeping it pure.
"""
