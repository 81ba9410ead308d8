"""Base domain types shared by every resource kind."""
