# commentmark/templatetags/markdown_tags.py

from django import template
from django.utils.html import escape
from django.utils.safestring import mark_safe

from commentmark.linkify import linkify_urls
from commentmark.renderer import markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value, enabled=True):
    """Escape comment text and render it; ``enabled=False`` only linkifies"""
    return mark_safe(markdown(escape(value), enabled=enabled))


@register.filter(name="markdown_plain")
def markdown_plain_filter(value):
    return mark_safe(linkify_urls(escape(value)))
