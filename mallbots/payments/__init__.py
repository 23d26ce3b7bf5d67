"""Payments and invoices: domain types, use cases and access logging."""