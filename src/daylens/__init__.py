"""daylens - schedule analytics for a personal productivity dashboard."""
