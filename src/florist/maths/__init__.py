__all__ = ["recurrence"]
