"""Infrastructure components: HTTP transport."""
