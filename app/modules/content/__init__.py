"""Shared content building blocks.

Translatable records, sparse-update patches, the entity type registry and
SEO metadata used by content modules such as ``modules.blog``.
"""
