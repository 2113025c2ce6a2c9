"""Terminal reporters."""
