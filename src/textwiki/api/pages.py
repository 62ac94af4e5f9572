"""Page lifecycle endpoints.

View, edit and save handlers. Each request is independent: the title is
validated, the page is loaded or saved through the store, and the result is
rendered or redirected.
"""

import logging

from aiohttp import web

from textwiki.app_keys import renderer_key, store_key, validator_key
from textwiki.core.errors import InvalidTitleError, PageNotFoundError, PageStorageError, RenderError
from textwiki.core.types import Page

logger = logging.getLogger(__name__)

READ_METHODS = ("GET", "HEAD")
WRITE_METHODS = ("POST",)


def create_pages_routes() -> list[web.RouteDef]:
    # Any-method prefix routes so every path under a prefix reaches the title
    # validator before the method is checked.
    return [
        web.route("*", "/view/{tail:.*}", view_page),
        web.route("*", "/edit/{tail:.*}", edit_page),
        web.route("*", "/save/{tail:.*}", save_page),
    ]


async def view_page(request: web.Request) -> web.Response:
    title = _extract_title(request, READ_METHODS)
    store = request.app[store_key]

    try:
        page = store.load(title)
    except PageNotFoundError:
        raise web.HTTPFound(f"/edit/{title}") from None

    return _render(request, "view", page)


async def edit_page(request: web.Request) -> web.Response:
    title = _extract_title(request, READ_METHODS)
    store = request.app[store_key]

    try:
        page = store.load(title)
    except PageNotFoundError:
        page = Page(title=title)

    return _render(request, "edit", page)


async def save_page(request: web.Request) -> web.Response:
    title = _extract_title(request, WRITE_METHODS)
    store = request.app[store_key]

    form = await request.post()
    value = form.get("body", "")
    if isinstance(value, web.FileField):
        body = value.file.read()
    else:
        body = value.encode("utf-8")

    try:
        store.save(Page(title=title, body=body))
    except PageStorageError as e:
        raise web.HTTPInternalServerError(text=str(e)) from e

    raise web.HTTPFound(f"/view/{title}")


def _extract_title(request: web.Request, allowed_methods: tuple[str, ...]) -> str:
    """Return the validated title or abort the request.

    An invalid title is answered 404 whatever the method; a valid title with
    a method the endpoint does not accept is answered 405.
    """
    validator = request.app[validator_key]
    try:
        title = validator.extract(request.path)
    except InvalidTitleError:
        logger.debug(f"Rejected path {request.path!r}")
        raise web.HTTPNotFound() from None

    if request.method not in allowed_methods:
        raise web.HTTPMethodNotAllowed(request.method, allowed_methods)
    return title


def _render(request: web.Request, name: str, page: Page) -> web.Response:
    renderer = request.app[renderer_key]
    try:
        html = renderer.render(name, page)
    except RenderError as e:
        raise web.HTTPInternalServerError(text=str(e)) from e
    return web.Response(text=html, content_type="text/html")
