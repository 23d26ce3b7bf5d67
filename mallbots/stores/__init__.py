"""Stores and products: domain rules, use cases and access logging."""