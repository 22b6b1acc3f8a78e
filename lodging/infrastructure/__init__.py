"""
Infrastructure layer.

SQLAlchemy persistence adapters, the unit of work and the in-process
event bus that implement the application layer's ports.
"""
