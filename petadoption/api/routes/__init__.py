"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - JSON endpoints keep the site's flat kebab-case paths (/pets, /add-animal, ...)
    - HTML pages live in pages.py and talk to the JSON endpoints over HTTP
"""
