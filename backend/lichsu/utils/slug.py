"""
URL slugs for Vietnamese titles.

    >>> vietnamese_slugify("Khởi nghĩa Hai Bà Trưng")
    'khoi-nghia-hai-ba-trung'
    >>> vietnamese_slugify("Đinh Bộ Lĩnh")
    'dinh-bo-linh'
"""
import re
import unicodedata


def vietnamese_slugify(text: str, max_length: int = 200) -> str:
    """Create URL-safe slug from a Vietnamese name."""
    if not text:
        return ""

    # đ/Đ have no decomposition, map them before stripping marks
    slug = text.strip().lower().replace("đ", "d").replace("Đ", "d")
    slug = unicodedata.normalize("NFD", slug)
    slug = "".join(ch for ch in slug if not unicodedata.combining(ch))

    # Remove non-alphanumeric characters (except hyphens)
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    # Replace spaces/multiple hyphens with single hyphen
    slug = re.sub(r"[\s-]+", "-", slug)
    return slug[:max_length].strip("-")
