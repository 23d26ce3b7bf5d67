"""Customers: domain rules, use cases, access logging and SQL storage."""