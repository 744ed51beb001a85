"""
Services Layer

Pure business logic services that:
- Accept domain inputs (access tokens, uuids, content)
- Return domain outputs (models)
- Do NOT depend on HTTP request/response objects
- Do NOT commit; the caller wraps mutations in a unit of work
"""
