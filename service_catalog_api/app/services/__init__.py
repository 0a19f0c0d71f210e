"""
Service layer abstraction.

Business logic lives here, independent of HTTP: record construction
(``record_factory``), list filtering (``query_filter``) and the CRUD
operations (``service_specification_service``).  Services receive the
store to work on from the caller, so the same code runs against the
in‑memory and MongoDB backends.
"""
