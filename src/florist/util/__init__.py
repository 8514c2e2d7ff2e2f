__all__ = ["io", "misc"]
