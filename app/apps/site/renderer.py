"""
Server-side rendering of the public site with Jinja2
"""
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
import re

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.apps.content.registry import RESOURCE_TYPES, get_resource_type
from app.apps.site.api_client import ApiClient
from app.apps.site.routing import route_href
from app.config import MEDIA_BASE_URL

TEMPLATE_DIR = Path(__file__).parent / "templates"

HOME_SECTION_SIZE = 3
HOME_SECTIONS = ("news", "events", "blog")

NAV_LINKS = (
    ("home", "Home"),
    ("about-us", "About Us"),
    ("admissions", "Admissions"),
    ("academics", "Academics"),
    ("student-life", "Student Life"),
    ("news", "News"),
    ("events", "Events"),
    ("blog", "Blog"),
    ("gallery", "Gallery"),
    ("documents", "Documents"),
    ("contact-us", "Contact Us"),
)

_TAG_RE = re.compile(r"<[^>]+>")


def media_url(path: Optional[str], base_url: Optional[str] = None) -> str:
    """Absolute URL for a stored media path; full URLs pass through"""
    if not path:
        return ""
    if path.startswith(("http://", "https://", "//", "data:")):
        return path
    base = MEDIA_BASE_URL if base_url is None else base_url
    return f"{base.rstrip('/')}/{path.lstrip('/')}" if base else path


def excerpt(text: Optional[str], length: int = 150) -> str:
    """Plain-text preview of HTML content"""
    plain = " ".join(_TAG_RE.sub(" ", text or "").split())
    if len(plain) <= length:
        return plain
    return plain[:length].rstrip() + "..."


def format_date(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, (date, datetime)):
        return value.strftime("%B %d, %Y").replace(" 0", " ")
    return str(value)


def item_location(resource_name: str, item: Dict[str, Any]) -> str:
    """Detail location of an item: by slug when it has one, else by id"""
    return f"{resource_name}/{item.get('slug') or item.get('id')}"


class SiteRenderer:
    """
    Renders site views into HTML fragments, and fragments into full
    documents. Data comes from the API through an ApiClient; nothing is
    cached between renders.
    """

    def __init__(self, template_dir: Path = TEMPLATE_DIR, media_base_url: Optional[str] = None):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )
        self.env.filters["media_url"] = lambda path: media_url(path, media_base_url)
        self.env.filters["excerpt"] = excerpt
        self.env.filters["format_date"] = format_date
        self.env.globals["href"] = route_href
        self.env.globals["item_location"] = item_location
        self.env.globals["nav_links"] = NAV_LINKS

    def render(self, template: str, **context) -> str:
        return self.env.get_template(template).render(**context)

    async def render_home(self, api: ApiClient) -> str:
        page = await api.fetch_data("pages/home")
        sections: List[Dict[str, Any]] = []
        for name in HOME_SECTIONS:
            items = await api.fetch_data(name)
            sections.append({
                "resource": RESOURCE_TYPES[name],
                "items": (items or [])[:HOME_SECTION_SIZE],
            })
        carousel = await api.fetch_data("carousel-images")
        return self.render("home.html", page=page, sections=sections, carousel=carousel or [])

    async def render_page(self, api: ApiClient, slug: str) -> str:
        page = await api.fetch_data(f"pages/{slug}")
        return self.render("page.html", page=page)

    async def render_list(self, api: ApiClient, resource_name: str) -> str:
        resource = get_resource_type(resource_name)
        items = await api.fetch_data(resource_name)
        return self.render("list.html", resource=resource, items=items or [])

    async def render_detail(self, api: ApiClient, resource_name: str, identifier: str) -> str:
        resource = get_resource_type(resource_name)
        item = await api.fetch_data(f"{resource_name}/{identifier}")
        return self.render("detail.html", resource=resource, item=item)

    def render_contact(self, message: Optional[str] = None, message_type: str = "success", form: Optional[dict] = None) -> str:
        return self.render("contact.html", message=message, message_type=message_type, form=form or {})

    def render_admin_login(self, message: Optional[str] = None) -> str:
        return self.render("admin_login.html", message=message)

    def render_admin_dashboard(self, context: Dict[str, Any]) -> str:
        return self.render("admin_dashboard.html", **context)

    def render_not_found(self, message: Optional[str] = None) -> str:
        return self.render("not_found.html", message=message)

    def render_document(self, content: str, title: str = "", active: str = "") -> str:
        """Wrap a rendered fragment in the site layout"""
        return self.render("layout.html", content=content, title=title, active=active)
