"""Domain modules for CTF Notice."""
