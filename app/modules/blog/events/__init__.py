"""Blog event handlers.

``modules.blog.events.handlers.register()`` wires the handlers into the
infrastructure event dispatcher at startup.
"""
