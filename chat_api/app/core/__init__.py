"""Process‑wide plumbing: settings, logging, the data store and the event broker."""
