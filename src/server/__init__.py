"""HTTP API for divi2html."""
