"""Application keys for type-safe app configuration access."""

from aiohttp import web

from genericfile.config import Config

config_key = web.AppKey("config", Config)
