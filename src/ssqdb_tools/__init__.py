"""Commit message linter and static quote DB generator."""
