"""Command line front end for mas (``mas`` console script)."""
