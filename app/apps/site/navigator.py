"""
Site navigation: resolves a location to a rendered view

Each navigation takes a new generation number. A render that finishes after
a newer navigation has started is dropped instead of replacing the view.
"""
from dataclasses import dataclass
from typing import List, Optional
import logging

from app.apps.site.admin import AdminDashboard
from app.apps.site.api_client import ApiClient, ApiError
from app.apps.site.renderer import SiteRenderer
from app.apps.site.routing import Route, RouteKind, parse_location

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class RenderedView:
    route: Route
    html: str
    title: str
    generation: int
    status_code: int = 200


class Navigator:
    def __init__(self, api: ApiClient, renderer: SiteRenderer, dashboard: Optional[AdminDashboard] = None):
        self.api = api
        self.renderer = renderer
        self.dashboard = dashboard or AdminDashboard(api)
        self.generation = 0
        self.history: List[str] = []
        self.view: Optional[RenderedView] = None

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    async def navigate(self, location: Optional[str], push: bool = True) -> Optional[RenderedView]:
        """
        Render a location and make it the current view

        Returns the view, or None when a newer navigation superseded this one.
        """
        self.generation += 1
        generation = self.generation
        route = parse_location(location)
        if push:
            self.history.append(route.location)
        self.view = None

        status_code = 200
        try:
            html = await self._dispatch(route)
        except ApiError as e:
            logger.warning(f"Could not render {route.location}: {e.message}")
            if route.kind == RouteKind.ADMIN and e.is_auth_error:
                html = self.renderer.render_admin_login("Your session has expired. Please log in again.")
            else:
                html = self.renderer.render_not_found(e.message)
                if e.status_code == 404:
                    status_code = 404
        except ValueError as e:
            html = self.renderer.render_not_found(str(e))
            status_code = 404

        if not self.is_current(generation):
            logger.debug(f"Discarding stale render of {route.location}")
            return None

        self.view = RenderedView(
            route=route,
            html=html,
            title=self._title(route),
            generation=generation,
            status_code=status_code,
        )
        return self.view

    async def back(self) -> Optional[RenderedView]:
        """Re-render the previous location without adding a history entry"""
        if len(self.history) < 2:
            return self.view
        self.history.pop()
        return await self.navigate(self.history[-1], push=False)

    async def _dispatch(self, route: Route) -> str:
        if route.kind == RouteKind.HOME:
            return await self.renderer.render_home(self.api)
        if route.kind == RouteKind.LIST:
            return await self.renderer.render_list(self.api, route.page_key)
        if route.kind == RouteKind.DETAIL:
            return await self.renderer.render_detail(self.api, route.page_key, route.identifier)
        if route.kind == RouteKind.CONTACT:
            return self.renderer.render_contact()
        if route.kind == RouteKind.ADMIN:
            return await self._render_admin(route)
        return await self.renderer.render_page(self.api, route.page_key)

    async def _render_admin(self, route: Route) -> str:
        if not self.dashboard.is_authenticated:
            return self.renderer.render_admin_login(route.params.get("message"))

        context = await self.dashboard.dashboard_context(
            tab=route.identifier or route.params.get("tab"),
            edit=route.params.get("edit"),
            new=route.params.get("new", "").lower() in TRUE_VALUES,
            message=route.params.get("message"),
            error=route.params.get("error"),
        )
        return self.renderer.render_admin_dashboard(context)

    @staticmethod
    def _title(route: Route) -> str:
        if route.kind == RouteKind.HOME:
            return "Home"
        if route.kind == RouteKind.ADMIN:
            return "Admin"
        if route.kind == RouteKind.CONTACT:
            return "Contact Us"
        return route.page_key.replace("-", " ").title()
