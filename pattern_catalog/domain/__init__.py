"""Domain layer - exceptions and catalogue entities shared by every demo."""
