"""Report versions of macOS background security updates."""
