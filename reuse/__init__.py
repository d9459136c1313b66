"""ReUse API - marketplace backend for donating, trading and selling items."""

__version__ = "1.0.0"
