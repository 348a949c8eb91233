"""Command-line glue for Rllq queries."""
