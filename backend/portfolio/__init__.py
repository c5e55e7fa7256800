"""Portfolio content API — JSON-file backed REST backend for a portfolio site."""
