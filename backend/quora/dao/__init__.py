"""
Data Access Layer

Thin wrappers over a SQLModel session that:
- Look records up by their public uuid / token
- Stage inserts, updates and deletes with flush()
- Never commit; the caller's unit of work owns the transaction
"""
