from typing import Optional, Tuple, Union

from std2.types import never

from ..editor import types as editor
from ..lsp import types as lsp
from ..protocol import Constants
from .enums import (
    from_marker_severity,
    from_marker_tag,
    to_marker_severity,
    to_marker_tag,
)
from .range import from_range, to_range


def from_related_information(
    info: editor.RelatedInformation,
) -> lsp.DiagnosticRelatedInformation:
    location = lsp.Location(uri=info.resource, range=from_range(info.range))
    return lsp.DiagnosticRelatedInformation(location=location, message=info.message)


def to_related_information(
    info: lsp.DiagnosticRelatedInformation,
) -> editor.RelatedInformation:
    return editor.RelatedInformation(
        resource=info.location.uri,
        message=info.message,
        range=to_range(info.location.range),
    )


def _from_code(
    code: Union[str, editor.MarkerCode, None]
) -> Tuple[Optional[str], Optional[lsp.CodeDescription]]:
    if code is None:
        return None, None
    elif isinstance(code, str):
        return code, None
    elif isinstance(code, editor.MarkerCode):
        return code.value, lsp.CodeDescription(href=code.target)
    else:
        never(code)


def _to_code(diagnostic: lsp.Diagnostic) -> Union[str, editor.MarkerCode, None]:
    if diagnostic.code is None:
        return None
    elif description := diagnostic.codeDescription:
        return editor.MarkerCode(value=str(diagnostic.code), target=description.href)
    else:
        return str(diagnostic.code)


def from_marker_data(consts: Constants, marker: editor.MarkerData) -> lsp.Diagnostic:
    code, description = _from_code(marker.code)
    tags = None if marker.tags is None else tuple(map(from_marker_tag, marker.tags))
    related = (
        None
        if marker.relatedInformation is None
        else tuple(map(from_related_information, marker.relatedInformation))
    )

    return lsp.Diagnostic(
        range=from_range(marker.range),
        message=marker.message,
        severity=from_marker_severity(consts, severity=marker.severity),
        code=code,
        codeDescription=description,
        source=marker.source,
        tags=tags,
        relatedInformation=related,
    )


def to_marker_data(consts: Constants, diagnostic: lsp.Diagnostic) -> editor.MarkerData:
    """
    Severity defaults to `Error` when the server leaves it out.
    """

    severity = (
        to_marker_severity(consts, severity=diagnostic.severity)
        if diagnostic.severity
        else consts.error_severity
    )
    tags = None if diagnostic.tags is None else tuple(map(to_marker_tag, diagnostic.tags))
    related = (
        None
        if diagnostic.relatedInformation is None
        else tuple(map(to_related_information, diagnostic.relatedInformation))
    )

    return editor.MarkerData(
        severity=severity,
        message=diagnostic.message,
        range=to_range(diagnostic.range),
        code=_to_code(diagnostic),
        source=diagnostic.source,
        tags=tags,
        relatedInformation=related,
    )
