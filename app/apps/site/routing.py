"""
Navigation locations for the public site

A location is a path-like string such as "#events/12", "blog/open-day" or
"admin/news?edit=3". It splits into a page key, an optional identifier and
optional query parameters, and resolves to one of a fixed set of route kinds.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode

from app.apps.content.registry import public_resource_names

SITE_PREFIX = "/site"
HOME_KEY = "home"
CONTACT_KEY = "contact-us"
ADMIN_KEY = "admin"
PAGE_STATE_PREFIX = "page:"


class RouteKind(str, Enum):
    HOME = "home"
    PAGE = "page"
    LIST = "list"
    DETAIL = "detail"
    CONTACT = "contact"
    ADMIN = "admin"


@dataclass(frozen=True)
class Route:
    kind: RouteKind
    page_key: str
    identifier: Optional[str] = None
    params: Dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def location(self) -> str:
        """Canonical location string, without query parameters"""
        if self.identifier:
            return f"{self.page_key}/{self.identifier}"
        return self.page_key

    @property
    def state(self) -> str:
        """Router state name: home, page:<slug>, news, news/<id>, contact-us, admin"""
        if self.kind == RouteKind.PAGE:
            return f"{PAGE_STATE_PREFIX}{self.page_key}"
        return self.location


def parse_location(location: Optional[str]) -> Route:
    """Resolve a navigation location to a route; an empty location is home"""
    path = (location or "").strip().lstrip("#").strip("/")

    params: Dict[str, str] = {}
    if "?" in path:
        path, query = path.split("?", 1)
        params = dict(parse_qsl(query))
        path = path.strip("/")

    if not path:
        return Route(RouteKind.HOME, HOME_KEY, params=params)

    parts = path.split("/")
    page_key = parts[0]
    identifier = parts[1] if len(parts) > 1 and parts[1] else None

    if page_key.startswith(PAGE_STATE_PREFIX):
        page_key = page_key[len(PAGE_STATE_PREFIX):] or HOME_KEY

    if page_key == HOME_KEY:
        return Route(RouteKind.HOME, HOME_KEY, params=params)
    if page_key == ADMIN_KEY:
        return Route(RouteKind.ADMIN, ADMIN_KEY, identifier, params)
    if page_key == CONTACT_KEY:
        return Route(RouteKind.CONTACT, CONTACT_KEY, params=params)
    if page_key in public_resource_names():
        kind = RouteKind.DETAIL if identifier else RouteKind.LIST
        return Route(kind, page_key, identifier, params)
    return Route(RouteKind.PAGE, page_key, params=params)


def route_href(location: str, **params) -> str:
    """Site URL for a location, e.g. route_href("events/3") -> /site/events/3"""
    href = f"{SITE_PREFIX}/{location.lstrip('#').strip('/')}"
    query = {key: value for key, value in params.items() if value is not None}
    if query:
        href = f"{href}?{urlencode(query)}"
    return href
