"""HTTP API for language detection and image selection."""
