"""XML encoder/decoder for TMPE_GlobalConfig.xml.

The document layout follows the files written by earlier releases:

    <?xml version='1.0' encoding='utf-8'?>
    <GlobalConfig xmlns="http://www.viathinksoft.de/tmpe">
      <Version>1</Version>
      <DebugSwitches>
        <boolean>false</boolean>
        ...
      </DebugSwitches>
      <HighwayLaneChangingBaseCost>0.25</HighwayLaneChangingBaseCost>
      ...
    </GlobalConfig>

One child element per field, named by the field alias. List fields are a
container element with one child per item. Elements that are missing from
a document fall back to the field default; unknown elements are ignored.
"""

import xml.etree.ElementTree as ET
from typing import Any, get_args, get_origin

from pydantic import ValidationError

from src.tmpe.domain.errors import ConfigDecodeError
from src.tmpe.domain.global_config import GlobalConfig

NAMESPACE = "http://www.viathinksoft.de/tmpe"
ROOT_TAG = "GlobalConfig"

# Item element names for list fields, keyed by item type
LIST_ITEM_TAGS: dict[type, str] = {bool: "boolean"}

_FIELD_ALIASES: dict[str, str] = {
    field.alias or name: name for name, field in GlobalConfig.model_fields.items()
}


def _qualify(tag: str) -> str:
    return f"{{{NAMESPACE}}}{tag}"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _is_list_field(name: str) -> bool:
    annotation = GlobalConfig.model_fields[name].annotation
    return get_origin(annotation) is list


def _list_item_tag(name: str) -> str:
    (item_type,) = get_args(GlobalConfig.model_fields[name].annotation)
    return LIST_ITEM_TAGS.get(item_type, "item")


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_global_config(config: GlobalConfig) -> bytes:
    """Serialize a GlobalConfig to an XML document.

    Args:
        config: The payload to encode.

    Returns:
        UTF-8 encoded XML bytes, including the XML declaration.

    Examples:
        >>> data = encode_global_config(GlobalConfig())
        >>> b"<Version>1</Version>" in data
        True
    """
    root = ET.Element(_qualify(ROOT_TAG))

    for name, field in GlobalConfig.model_fields.items():
        element = ET.SubElement(root, _qualify(field.alias or name))
        value = getattr(config, name)
        if _is_list_field(name):
            item_tag = _qualify(_list_item_tag(name))
            for item in value:
                ET.SubElement(element, item_tag).text = _format_scalar(item)
        else:
            element.text = _format_scalar(value)

    ET.indent(root, space="  ")
    return (
        ET.tostring(
            root,
            encoding="utf-8",
            xml_declaration=True,
            default_namespace=NAMESPACE,
        )
        + b"\n"
    )


def decode_global_config(data: bytes) -> GlobalConfig:
    """Parse an XML document into a GlobalConfig.

    Args:
        data: Raw bytes read from the config file.

    Returns:
        The validated payload.

    Raises:
        ConfigDecodeError: If the document is not well-formed XML, has an
            unexpected root element, or holds values that fail validation.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ConfigDecodeError(f"Malformed global config document: {exc}") from exc

    if root.tag != _qualify(ROOT_TAG):
        raise ConfigDecodeError(
            f"Unexpected root element '{root.tag}', expected '{_qualify(ROOT_TAG)}'"
        )

    values: dict[str, Any] = {}
    for element in root:
        alias = _local_name(element.tag)
        name = _FIELD_ALIASES.get(alias)
        if name is None:
            continue
        if _is_list_field(name):
            values[alias] = [(item.text or "").strip() for item in element]
        else:
            values[alias] = (element.text or "").strip()

    try:
        return GlobalConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigDecodeError(f"Invalid global config values: {exc}") from exc
