"""Cross‑cutting infrastructure: configuration, logging, database and errors."""
