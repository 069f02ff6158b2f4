"""
Service layer abstraction.

Services hold the operations for a domain and receive their store
through the constructor, so API handlers never touch SQL directly.
"""
