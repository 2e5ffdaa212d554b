"""Domain layer for the word of the day backend.

Entities, repository ports and domain errors for users and daily words,
decoupled from the document store that persists them.
"""
