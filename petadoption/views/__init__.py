"""Views — request-scoped page state for the public listing and admin pages.

Invariants:
    - Views reach data only through PetsApiClient (HTTP), never the database
    - A view instance lives for one page render; nothing is cached across requests
"""
