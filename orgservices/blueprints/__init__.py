"""Blueprint package — one blueprint per service plus the health check."""
