"""Shared helpers for the sshare package."""
