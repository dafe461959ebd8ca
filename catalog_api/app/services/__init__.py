"""
Service layer.

Each service encapsulates the SQL for one catalog entity.  Services
receive an open connection from the caller and never keep it beyond
the call, so the same code serves HTTP requests and tests alike.
"""
