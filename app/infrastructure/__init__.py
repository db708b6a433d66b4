"""Infrastructure modules for the content backend.

Centralized infrastructure components:
- configuration: Settings management (Settings, ContentSettings, DatabaseSettings)
- logging: Structured logging setup (configure_logging, get_module_logger)
- i18n: Supported locales (Locale)
- operations: Operation results, domain errors, and the error boundary
- events: In-process domain event dispatcher
- models: Base Pydantic models and response wrappers
- persistence: Relational store engine and session management
- services: Application-scoped providers (get_settings)
"""
