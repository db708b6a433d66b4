"""Fixtures for blog module tests."""

import pytest

from infrastructure.i18n import Locale
from modules.blog.repository import SqlAlchemyPostRepository
from modules.blog.service import BlogService
from modules.content.persistence import SeoMetadataRepository


@pytest.fixture
def post_repository(session_factory):
    return SqlAlchemyPostRepository(session_factory, fallback_locale=Locale.ENGLISH)


@pytest.fixture
def seo_repository(session_factory):
    return SeoMetadataRepository(session_factory, fallback_locale=Locale.ENGLISH)


@pytest.fixture
def blog_service(post_repository, seo_repository, registry):
    return BlogService(
        posts=post_repository,
        seo_metadata=seo_repository,
        default_locale=Locale.ENGLISH,
        registry=registry,
    )
