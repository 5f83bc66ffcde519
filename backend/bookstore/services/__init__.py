"""Services Layer: persistence operations behind the route handlers."""
