"""
Accept-Language negotiation.

Picks the best available language code for a user agent's
Accept-Language header following RFC 2616 section 14.4:

    Accept-Language = 1#( language-range [ ";" "q" "=" qvalue ] )
    language-range  = ( ( 1*8ALPHA *( "-" 1*8ALPHA ) ) | "*" )

Example:
    from common.i18n import get_best_matching_langcode

    get_best_matching_langcode("hu, en-us;q=0.66, en;q=0.33", ["en", "hu"])  # "hu"
"""

import re
from typing import Dict, Iterable, Optional, Union

_LANGUAGE_RANGE = re.compile(
    r"(?:(?<=[, ])|^)([a-zA-Z-]+|\*)(?:;q=([0-9.]+))?(?:$|\s*,\s*)"
)
_QVALUE_PREFIX = re.compile(r"^\d*(?:\.\d*)?")

# Chinese uses script subtags as its generic tag instead of plain "zh".
_CHINESE_GENERIC_TAGS = ("zh-hant", "zh-hans")


def _parse_qvalue(raw: Optional[str]) -> float:
    if raw is None:
        return 1.0
    prefix = _QVALUE_PREFIX.match(raw).group(0)
    try:
        return float(prefix)
    except ValueError:
        return 0.0


def _generic_tag(langcode: str) -> str:
    if len(langcode) > 7 and langcode[:7] in _CHINESE_GENERIC_TAGS:
        return langcode[:7]
    return next((part for part in langcode.split("-") if part), "")


def parse_accept_language(
    header: Optional[str],
    mappings: Optional[Dict[str, str]] = None,
) -> Dict[str, Union[int, float]]:
    """
    Parse an Accept-Language header into language ranges and weights.

    Weights are qvalues multiplied by 1000 (RFC 2616 allows at most three
    decimals). Generic tags missing from the header are added with a
    weight just below their lowest specific tag.

    Args:
        header: Raw Accept-Language header value
        mappings: Optional user agent langcode -> standard langcode map

    Returns:
        Dict of lowercase language range -> weight
    """
    ua_langcodes: Dict[str, Union[int, float]] = {}
    if not header:
        return ua_langcodes

    for match in _LANGUAGE_RANGE.finditer(header.strip()):
        langcode = match.group(1).lower()
        if mappings:
            for ua_langcode, standard_langcode in mappings.items():
                if langcode == ua_langcode:
                    langcode = standard_langcode.lower()

        qvalue = int(_parse_qvalue(match.group(2)) * 1000)
        # Mappings may resolve several ranges to one langcode; keep the highest.
        ua_langcodes[langcode] = max(qvalue, ua_langcodes.get(langcode, 0))

    # Some user agents send only specific tags (fr-CA) without the generic
    # one (fr). Assume the generic tag is worth slightly less than the
    # lowest specific tag.
    for langcode, qvalue in sorted(ua_langcodes.items(), key=lambda item: item[1]):
        generic = _generic_tag(langcode)
        if generic and generic not in ua_langcodes:
            ua_langcodes[generic] = qvalue - 0.1

    return ua_langcodes


def get_best_matching_langcode(
    header: Optional[str],
    langcodes: Iterable[str],
    mappings: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """
    Identify the available language code best matching the header.

    Each available code takes the weight of the longest language range
    that is a prefix of it, or the wildcard weight when none matches.
    Ties keep the code listed first.

    Args:
        header: Raw Accept-Language header value
        langcodes: Available language codes (case preserved in the result)
        mappings: Optional user agent langcode -> standard langcode map

    Returns:
        Best matching language code, or None when nothing matches
    """
    ua_langcodes = parse_accept_language(header, mappings)

    best_match: Optional[str] = None
    max_qvalue: Union[int, float] = 0
    for langcode_case_sensitive in langcodes:
        # Language tags are case insensitive (RFC 2616, section 3.10).
        langcode = langcode_case_sensitive.lower()
        qvalue = ua_langcodes.get("*", 0)

        prefix = langcode
        while prefix:
            if prefix in ua_langcodes:
                qvalue = ua_langcodes[prefix]
                break
            prefix = prefix[:prefix.rfind("-")] if "-" in prefix else ""

        if qvalue > max_qvalue:
            best_match = langcode_case_sensitive
            max_qvalue = qvalue

    return best_match
