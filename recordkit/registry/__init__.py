"""Registry — the in-memory owner of records.

The registry provides:
- Creation: validated, sequentially numbered records
- Lookup: point reads by id
- Discovery: case-sensitive substring search on names
- Export: the full id → record mapping as JSON or YAML
"""
