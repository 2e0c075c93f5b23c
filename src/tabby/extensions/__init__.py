"""Extension element builders — image, video, news, and alternate links.

Each builder validates its record and appends the extension's elements to
a ``<url>`` element in the fixed order the extension's schema defines.
"""

from tabby.extensions.alternates import add_alternate
from tabby.extensions.image import add_image
from tabby.extensions.news import add_news
from tabby.extensions.video import add_video

__all__ = ["add_alternate", "add_image", "add_news", "add_video"]
