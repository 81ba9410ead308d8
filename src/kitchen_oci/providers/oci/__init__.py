"""Oracle Cloud Infrastructure provider."""
