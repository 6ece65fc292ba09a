"""Domain layer - Expiry evaluation and inventory records."""
