"""Application keys for type-safe app configuration access."""

from aiohttp import web

from textwiki.core.store import PageStore
from textwiki.core.templates import TemplateRenderer
from textwiki.core.titles import TitleValidator

store_key = web.AppKey("store", PageStore)
renderer_key = web.AppKey("renderer", TemplateRenderer)
validator_key = web.AppKey("validator", TitleValidator)
