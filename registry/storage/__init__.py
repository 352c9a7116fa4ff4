"""Fixed-width cell storage: key derivation, word arithmetic, layout and chunked strings."""
