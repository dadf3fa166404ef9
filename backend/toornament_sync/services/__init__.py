"""
Services Layer

Pure conversion logic plus storage helpers that:
- Accept domain inputs (Toornament records, sessions, IDs)
- Return domain outputs (brackets-model records, dicts)
- Do NOT depend on HTTP request/response objects
- Do NOT touch the database, except services.storage
"""
