"""
Application layer.

The application layer orchestrates domain objects. It contains the use
cases available to external actors and the ports (protocols) through
which persistence and policy collaborators are reached.
"""
