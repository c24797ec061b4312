"""
Application package initializer.

The directory service is organised into logical pieces: ``core``
holds configuration, logging, error handlers, security helpers and the
in‑memory store; ``schemas`` holds the Pydantic request/response
models; ``services`` holds the business logic for firms, reviews,
resources and users; ``api`` exposes the routers.  The ASGI app lives
in ``main`` and is not imported here, so the schemas and services can
be used (e.g. by ``prop_directory_client``) without building an app.
"""
