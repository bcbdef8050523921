"""Storage contract and its SQLAlchemy implementation."""
