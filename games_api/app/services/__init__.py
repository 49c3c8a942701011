"""
Service layer.  Services receive the store they operate on, so the
endpoints never touch the games document directly.
"""
