"""Command-line front end for the clinic scheduler."""
