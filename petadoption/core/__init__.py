"""Core — pure rules and boundary contracts, no IO.

Invariants:
    - Core never imports from infrastructure, api or views
"""
