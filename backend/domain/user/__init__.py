"""User domain module.

Manages user records: display name, Twitter handle, public key and the
single active-user flag.
"""
