"""
Plugin Routes — dev server

GET /api/v1/plugin/                         → plugin summary
GET /api/v1/plugin/components/{identifier}  → single registered component
GET /api/v1/plugin/asset?path=js/editor.js  → resolved asset URL

Read-only; the plugin instance lives on app.state.plugin.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from block_pattern_builder.plugin import Plugin

router = APIRouter(tags=["Plugin"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class ComponentResponse(BaseModel):
    identifier: str
    type: str


class PluginInfoResponse(BaseModel):
    text_domain: str
    path: str
    uri: str
    components: list[ComponentResponse]


class AssetResponse(BaseModel):
    path: str
    url: str


# ── Dependencies ───────────────────────────────────────────────────────────────


def get_plugin(request: Request) -> Plugin:
    return request.app.state.plugin


def _component_response(plugin: Plugin, identifier: str) -> ComponentResponse:
    component = plugin.get_component(identifier)
    return ComponentResponse(identifier=identifier, type=type(component).__name__)


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/", response_model=PluginInfoResponse)
def plugin_info(plugin: Plugin = Depends(get_plugin)) -> PluginInfoResponse:
    """Summarise the plugin install and its registered components."""
    return PluginInfoResponse(
        text_domain=plugin.settings.text_domain,
        path=plugin.path(),
        uri=plugin.uri(),
        components=[_component_response(plugin, i) for i in plugin.components.identifiers()],
    )


@router.get("/components/{identifier}", response_model=ComponentResponse)
def get_component(identifier: str, plugin: Plugin = Depends(get_plugin)) -> ComponentResponse:
    """Get a registered component; 404 when the identifier is unknown."""
    return _component_response(plugin, identifier)


@router.get("/asset", response_model=AssetResponse)
def resolve_asset(
    path: str = Query(..., description="Asset path relative to the public folder"),
    plugin: Plugin = Depends(get_plugin),
) -> AssetResponse:
    """Resolve an asset path to its cache-busted URL."""
    return AssetResponse(path=path, url=plugin.asset(path))
