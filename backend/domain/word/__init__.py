"""Word domain module.

Manages the word of the day: one word per calendar date, credited to a user.
"""
