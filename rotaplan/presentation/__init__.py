"""Text presentation of schedules."""
