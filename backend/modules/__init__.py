"""
Feature modules for the Outreach backend.

Each module keeps its own models, exceptions and repository, and exposes
Protocol interfaces in interfaces.py where other modules depend on it.
Access to the privileged store client goes through modules.access only.
"""
