"""Resilient async client and CRUD test harness for the restful-api.dev /objects resource."""

__version__ = "0.1.0"
