"""Route declarations used by loader, generator and CLI tests."""
