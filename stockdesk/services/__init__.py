"""Service layer package housing core business logic.

Contains the JSON-file collection stores, the mock quote generator,
and the localized response messages. Each service is used by routes.
"""
