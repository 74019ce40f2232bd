"""
Helpers for requesting resized renditions of stored images.
"""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def get_optimized_image_url(url: str | None, width: int) -> str:
    """
    Append storage transformation parameters to an image URL.

    Sets ``width``, ``format=webp``, ``quality=80`` and ``resize=contain``,
    replacing existing values. URLs that are not absolute are returned as is.
    """
    if not url:
        return ""

    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return url

    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    params.update({
        "width": str(width),
        "format": "webp",
        "quality": "80",
        "resize": "contain",
    })
    return urlunsplit(parts._replace(query=urlencode(params)))
