"""Blog module.

Posts with per-locale title, description and content, a draft → published →
archived lifecycle, and optional SEO metadata.
"""
