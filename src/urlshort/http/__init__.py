"""HTTP primitives: immutable request, response, and redirect values."""
