"""Decoders turning a 7Timer response body into a generic document tree.

JSON bodies decode as-is. XML bodies are flattened the way the API's XML
consumers usually see them: the root element is dropped, attributes and child
elements become keys, repeated children become lists and text stays text.
"""
from __future__ import annotations

import json
from typing import Any

from lxml import etree

from .errors import ReportDecodeError

TEXT_CONTENT_KEY = "content"


def decode_json(body: str) -> dict[str, Any]:
    try:
        document = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ReportDecodeError("7Timer response was not valid JSON") from exc

    if not isinstance(document, dict):
        raise ReportDecodeError("Unexpected 7Timer JSON response shape")
    return document


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _element_value(element: etree._Element) -> Any:
    children = [child for child in element if isinstance(child.tag, str)]
    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text or None

    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(_local_name(child.tag), []).append(_element_value(child))

    node: dict[str, Any] = {_local_name(name): value for name, value in element.attrib.items()}
    for key, values in grouped.items():
        if key in node:
            values = [node[key], *values]
        node[key] = values[0] if len(values) == 1 else values

    if text:
        node[TEXT_CONTENT_KEY] = text
    return node


def decode_xml(body: str) -> dict[str, Any]:
    parser = etree.XMLParser(
        encoding="utf-8", resolve_entities=False, no_network=True, remove_comments=True
    )
    try:
        root = etree.fromstring(body.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise ReportDecodeError("7Timer response was not valid XML") from exc

    document = _element_value(root)
    if isinstance(document, dict):
        return document
    if document is None:
        return {}
    return {TEXT_CONTENT_KEY: document}


def decode_body(body: str, output: str) -> dict[str, Any]:
    if output == "json":
        return decode_json(body)
    if output == "xml":
        return decode_xml(body)
    return {"data": body}
