"""Scaffolding — project templates rendered at generation time.

Entity naming is a generation-time parameter: the ``{{name}}`` and
``{{Name}}`` tokens are resolved when a skeleton is written and never appear
in the runtime data model.
"""
