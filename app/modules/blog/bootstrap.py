"""Blog module startup.

Registers entity types, creates tables, wires event handlers and builds the
``BlogService``. Registration happens once per process, before any request is
handled; the registry is frozen afterwards.
"""

from typing import List, Optional, Sequence

from sqlalchemy.engine import Engine

from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.persistence import create_tables, make_session_factory
from infrastructure.services import get_engine, get_settings
from modules.blog.domain import Post
from modules.blog.events import handlers
from modules.blog.repository import SqlAlchemyPostRepository
from modules.blog.service import BlogService
from modules.content.domain.registry import EntityTypeRegistry, entity_types
from modules.content.persistence import SeoMetadataRepository

logger = get_module_logger()

# Every class that can own SEO metadata.
ENTITY_TYPES: Sequence[type] = (Post,)


def register_entity_types(
    registry: EntityTypeRegistry = entity_types,
    candidates: Sequence[type] = ENTITY_TYPES,
) -> List[str]:
    """Discover tagged ``candidates`` into ``registry`` and freeze it.

    A registry that is already frozen is left as is.
    """
    if registry.is_frozen:
        return [tag for tag, _ in registry.items()]
    registered = registry.discover(candidates)
    registry.freeze()
    return registered


def build_blog_service(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    registry: EntityTypeRegistry = entity_types,
) -> BlogService:
    settings = settings or get_settings()
    engine = engine or get_engine()

    create_tables(engine)
    session_factory = make_session_factory(engine)

    content = settings.content
    fallback_locale = content.DEFAULT_LOCALE if content.TRANSLATION_FALLBACK else None

    return BlogService(
        posts=SqlAlchemyPostRepository(session_factory, fallback_locale),
        seo_metadata=SeoMetadataRepository(session_factory, fallback_locale),
        default_locale=content.DEFAULT_LOCALE,
        registry=registry,
    )


def bootstrap(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    registry: EntityTypeRegistry = entity_types,
) -> BlogService:
    """Start the blog module and return its service."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL, settings.is_production)

    handlers.register()
    entity_tags = register_entity_types(registry)
    service = build_blog_service(settings, engine, registry)
    logger.info(
        "blog_module_started",
        entity_types=entity_tags,
        default_locale=settings.content.DEFAULT_LOCALE.value,
        translation_fallback=settings.content.TRANSLATION_FALLBACK,
    )
    return service
