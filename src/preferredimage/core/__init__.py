"""Language detection and image ranking."""
