"""Shopping-mall order service: customers, stores, baskets, ordering, depot and payments."""

__version__ = "0.1.0"