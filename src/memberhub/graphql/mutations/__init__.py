"""Root mutation type and input types."""
