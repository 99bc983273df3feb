"""Scheduled silent-push dispatcher for the GitHub wallpaper app."""
