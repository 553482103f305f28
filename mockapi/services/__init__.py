"""
Use cases for the mock API.

Routers (FastAPI endpoints) call a CollectionService instead of touching the
JSON files directly; pagination is a pure helper shared by the list use case.
"""
