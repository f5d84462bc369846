"""
Rendering Module - Data-driven rendering of static section content
"""

from typing import Callable, Iterable, List, Optional, TypeVar

from flask import get_template_attribute
from markupsafe import Markup

T = TypeVar('T')
R = TypeVar('R')

MACROS_TEMPLATE = 'macros.html'


def render_entries(entries: Iterable[T], render_one: Callable[[T], R]) -> List[R]:
    """
    Render an ordered sequence of records, one element per record

    Args:
        entries: Records to render
        render_one: Renders a single record

    Returns:
        list: Rendered elements in the same order as entries
    """
    return [render_one(entry) for entry in entries]


def macro_renderer(macro_name: str) -> Callable[..., Markup]:
    """Look up a macro from macros.html (requires an app context)"""
    return get_template_attribute(MACROS_TEMPLATE, macro_name)


def render_contact_info(entries) -> List[Markup]:
    return render_entries(entries, macro_renderer('contact_link'))


def render_nav_links(links) -> List[Markup]:
    return render_entries(links, macro_renderer('nav_link'))


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the body element

    Example:
        >>> get_page_specific_class('pages', 'index')
        'page-pages page-pages-index'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
