# topmark:header:start
#
#   project      : Embedres
#   file         : pipeline.py
#   file_relpath : src/embedres/pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoding pipeline: from raw resource bytes to rendered source literals.

The generator hands each resource (path + raw bytes) to this module, which:

1. selects a subformat (explicitly, by configured path patterns, or the default),
2. parses the content with `SubFormat.from_raw`,
3. builds the layout document with `SubFormat.pprint` at the configured column and
   width, and renders it with `embedres.document.pretty`,
4. renders the optional header/footer fragments.

Everything here is pure: no file I/O, no state kept between calls. A `ParseError`
raised for one resource is recorded by `encode_resources` and does not affect the
resources already encoded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from embedres.config.logging import get_logger
from embedres.document import pretty
from embedres.errors import ParseError
from embedres.literals import parse_int_literal, parse_list_literal, parse_string_literal
from embedres.subformats.registry import get_subformat, subformat_names
from embedres.subformats.types import format_resource_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from embedres.config import Config
    from embedres.config.logging import EmbedresLogger
    from embedres.document import Doc
    from embedres.subformats.base import SubFormat
    from embedres.subformats.types import ResourcePath, SubFormatInfo

logger: EmbedresLogger = get_logger(__name__)


@dataclass(frozen=True)
class EncodedResource:
    """A resource rendered as a source literal.

    Attributes:
        path (ResourcePath): Path of the resource in the resource tree.
        info (SubFormatInfo): Naming metadata of the subformat used.
        text (str): The rendered literal.
        header (str | None): Rendered header fragment, if the subformat provides one.
        footer (str | None): Rendered footer fragment, if the subformat provides one.
    """

    path: ResourcePath
    info: SubFormatInfo
    text: str
    header: str | None = None
    footer: str | None = None


@dataclass(frozen=True)
class ResourceFailure:
    """A resource that could not be encoded."""

    path: ResourcePath
    subformat: str
    reason: str


@dataclass
class EncodeReport:
    """Outcome of `encode_resources`, in input order."""

    encoded: list[EncodedResource] = field(default_factory=lambda: [])
    failures: list[ResourceFailure] = field(default_factory=lambda: [])

    @property
    def ok(self) -> bool:
        return not self.failures


def select_subformat(path: ResourcePath, config: Config) -> SubFormat[Any]:
    """Return the subformat to use for ``path``.

    Subformats are tried in sorted name order; the first one whose configured
    patterns match the ``/``-joined path wins. Otherwise the configured default is
    returned.
    """
    rel: str = format_resource_path(path)
    for name in subformat_names():
        spec = config.spec_for(name)
        if spec is not None and spec.match_file(rel):
            logger.debug("Resource %s matches patterns of subformat '%s'", rel, name)
            return get_subformat(name)
    return get_subformat(config.default_subformat)


def _render_optional(doc: Doc | None, width: int) -> str | None:
    return None if doc is None else pretty(doc, width)


def encode_resource(
    path: ResourcePath,
    data: bytes,
    *,
    config: Config,
    subformat: SubFormat[Any] | None = None,
) -> EncodedResource:
    """Encode one resource.

    Args:
        path (ResourcePath): Path of the resource in the resource tree.
        data (bytes): Raw content of the resource.
        config (Config): Render settings and subformat selection rules.
        subformat (SubFormat[Any] | None): Subformat to use; selected from ``config``
            when None.

    Returns:
        EncodedResource: The rendered literal and its metadata.

    Raises:
        ParseError: If the content does not conform to the subformat.
    """
    if subformat is None:
        subformat = select_subformat(path, config)

    value: Any = subformat.from_raw(path, data)
    info: SubFormatInfo = subformat.describe(path, value)
    logger.debug(
        "Encoding %s (%d bytes) with subformat '%s'",
        format_resource_path(path),
        len(data),
        info.name,
    )

    doc: Doc = subformat.pprint(config.column, config.width, path, value)
    return EncodedResource(
        path=path,
        info=info,
        text=pretty(doc, config.width),
        header=_render_optional(subformat.pprint_header(path, value), config.width),
        footer=_render_optional(subformat.pprint_footer(path, value), config.width),
    )


def encode_resources(
    items: Iterable[tuple[ResourcePath, bytes]],
    *,
    config: Config,
) -> EncodeReport:
    """Encode many resources, isolating parse failures per resource.

    Args:
        items (Iterable[tuple[ResourcePath, bytes]]): ``(path, data)`` pairs.
        config (Config): Render settings and subformat selection rules.

    Returns:
        EncodeReport: Encoded resources and failures, each in input order.
    """
    report = EncodeReport()
    for path, data in items:
        try:
            report.encoded.append(encode_resource(path, data, config=config))
        except ParseError as exc:
            logger.error("Skipping resource %s: %s", format_resource_path(path), exc)
            report.failures.append(
                ResourceFailure(path=path, subformat=exc.subformat, reason=exc.reason)
            )
    logger.info(
        "Encoded %d resource(s), %d failure(s)",
        len(report.encoded),
        len(report.failures),
    )
    return report


def verify_roundtrip(path: ResourcePath, data: bytes, subformat: SubFormat[Any]) -> bool:
    """Return True if ``to_raw(from_raw(data))`` reproduces ``data``.

    Raises:
        ParseError: If ``data`` does not conform to the subformat.
    """
    restored: bytes = subformat.to_raw(path, subformat.from_raw(path, data))
    if restored != data:
        logger.info(
            "Round-trip mismatch for %s with subformat %r",
            format_resource_path(path),
            subformat,
        )
        return False
    return True


def decode_rendered(info: SubFormatInfo, rendered: str) -> bytes | list[bytes] | int:
    """Read a rendered literal back into its generation-time value.

    Dispatches on the run-time type name: ``string`` literals decode to bytes,
    ``string list`` literals to a list of bytes, ``int`` literals to an int.

    Raises:
        LiteralSyntaxError: If ``rendered`` is not a well-formed literal.
        ValueError: If no reader exists for ``info.type_name``.
    """
    if info.type_name == "string":
        return parse_string_literal(rendered)
    if info.type_name == "string list":
        return parse_list_literal(rendered)
    if info.type_name == "int":
        return parse_int_literal(rendered)
    raise ValueError(f"No literal reader for type '{info.type_name}'")
