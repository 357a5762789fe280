"""crawlls API: one domain per package, one definition per file."""
