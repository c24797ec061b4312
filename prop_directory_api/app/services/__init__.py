"""
Service layer abstraction.

Each service encapsulates business logic for a domain and operates on
the :class:`~prop_directory_api.app.core.store.Store` handed to it by
the API layer.  Services never raise for a missing record; they return
``None`` or ``False`` and leave the HTTP mapping to the endpoints.
"""
