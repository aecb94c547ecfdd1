"""Shared utilities for hyprhelp."""
