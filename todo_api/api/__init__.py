"""HTTP surface of the todo API."""
