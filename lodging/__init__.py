"""
Lodging inventory core: accommodations, floors, rooms, room types and hotel rooms.

Hosts call ``lodging.config.configure_logging(settings.ENVIRONMENT)`` once at
startup, then resolve use cases from ``lodging.core.container`` (see
``lodging.infrastructure.common.di.use_case_scope``).
"""
