"""Presentation adapters for the blog service.

Controllers are thin: they validate raw payloads into request schemas, call
the service, and render the ``OperationResult`` as an ``APIResponse``. Any
exception escaping the service (including configuration errors) is turned
into an ``ErrorResponse`` by ``error_boundary``.
"""

from typing import Any, Dict, Optional, Union

from infrastructure.models import APIResponse, ErrorResponse
from infrastructure.operations.boundary import error_boundary
from modules.blog.schemas import GetPostRequest, PostContentRequest, SeoMetadataRequest
from modules.blog.service import BlogService

Response = Union[APIResponse, ErrorResponse]


class BlogController:
    def __init__(self, service: BlogService):
        self.service = service

    @error_boundary
    def get_post(self, post_id: str, locale: str) -> Response:
        request = GetPostRequest(post_id=post_id, locale=locale)
        return APIResponse.from_result(self.service.get_post(request))

    @error_boundary
    def list_posts(self, locale: Optional[str] = None) -> Response:
        return APIResponse.from_result(self.service.list_posts(locale))

    @error_boundary
    def create_post(self, payload: Dict[str, Any], locale: Optional[str] = None) -> Response:
        result = self.service.create_post(
            title=payload["title"],
            content=payload["content"],
            description=payload.get("description"),
            locale=locale,
        )
        return APIResponse.from_result(result)

    @error_boundary
    def update_post_content(self, post_id: str, payload: Dict[str, Any], locale: Optional[str] = None) -> Response:
        request = PostContentRequest.model_validate(payload)
        return APIResponse.from_result(self.service.update_post_content(post_id, locale, request))

    @error_boundary
    def publish_post(self, post_id: str, locale: Optional[str] = None) -> Response:
        return APIResponse.from_result(self.service.publish_post(post_id, locale))

    @error_boundary
    def unpublish_post(self, post_id: str) -> Response:
        return APIResponse.from_result(self.service.unpublish_post(post_id))

    @error_boundary
    def archive_post(self, post_id: str) -> Response:
        return APIResponse.from_result(self.service.archive_post(post_id))

    @error_boundary
    def delete_post(self, post_id: str) -> Response:
        return APIResponse.from_result(self.service.delete_post(post_id))

    @error_boundary
    def update_seo_metadata(self, post_id: str, payload: Dict[str, Any], locale: Optional[str] = None) -> Response:
        request = SeoMetadataRequest.model_validate(payload)
        return APIResponse.from_result(self.service.update_seo_metadata(post_id, locale, request))

    @error_boundary
    def get_seo_metadata(self, post_id: str, locale: Optional[str] = None) -> Response:
        return APIResponse.from_result(self.service.get_seo_metadata(post_id, locale))
