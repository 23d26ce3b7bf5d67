"""Depot shopping lists: domain rules, use cases, access logging and SQL storage."""