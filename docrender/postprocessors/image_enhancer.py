# docrender/postprocessors/image_enhancer.py

from .utils import add_classes, get_shared_soup, soup_to_html

IMAGE_CLASSES = ["mk-img", "bg-stone-50/95", "p-1"]


def image_enhancer(html: str, context: dict) -> str:
    """Give every <img> the framed image presentation classes."""
    soup = get_shared_soup(html, context)
    for img in soup.find_all("img"):
        add_classes(img, IMAGE_CLASSES)
    return soup_to_html(context, soup)
