"""Adapters connecting the core to git, HTML templates, and the filesystem."""
