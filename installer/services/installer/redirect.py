"""
Installer redirect urls.
"""

from typing import Dict
from urllib.parse import urlencode

INSTALL_PATH = "/install"


def install_full_redirect_url(parameters: Dict[str, str], base_url: str = "") -> str:
    """
    Build the url of the next installer step.

    Args:
        parameters: Parameters carried to the next step
        base_url: Absolute site url; empty for a site-relative url

    Returns:
        Url such as "/install?langcode=sv"
    """
    url = base_url.rstrip("/") + INSTALL_PATH
    if parameters:
        url += "?" + urlencode(parameters)
    return url
