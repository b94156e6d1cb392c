"""Mapping between wire JSON and the schema models."""

import json
from typing import Any, Callable, List, TypeVar

from pydantic import TypeAdapter, ValidationError

from client.exceptions import TransportError
from client.schemas import ContainerInfo, EncryptedInfo, FullInfo, Report, ReportInfo, Token

T = TypeVar('T')

_report_list = TypeAdapter(List[ReportInfo])


def _load_json(content: bytes, what: str) -> Any:
    try:
        return json.loads(content)
    except ValueError as e:
        raise TransportError(f"Malformed {what} response: {e}", cause=e) from e


def _validate(model: Callable[[Any], T], data: Any, what: str) -> T:
    try:
        return model(data)
    except ValidationError as e:
        raise TransportError(f"Unexpected {what} shape: {e.error_count()} error(s)", cause=e) from e


def decode_container(content: bytes) -> ContainerInfo:
    """
    Decode a container response.

    The full shape is tried first; only if it does not validate is the
    id-only encrypted shape tried. The two are never merged.

    Raises:
        TransportError: If the body matches neither shape
    """
    data = _load_json(content, 'container')
    try:
        return FullInfo.model_validate(data)
    except ValidationError:
        pass
    return _validate(EncryptedInfo.model_validate, data, 'container')


def decode_full_container(content: bytes) -> FullInfo:
    return _validate(FullInfo.model_validate, _load_json(content, 'container'), 'container')


def decode_token(content: bytes) -> Token:
    return _validate(Token.model_validate, _load_json(content, 'token'), 'token')


def decode_report_info(content: bytes) -> ReportInfo:
    return _validate(ReportInfo.model_validate, _load_json(content, 'report'), 'report')


def decode_report_infos(content: bytes) -> List[ReportInfo]:
    return _validate(_report_list.validate_python, _load_json(content, 'report list'), 'report list')


def decode_report(content: bytes) -> Report:
    return _validate(Report.model_validate, _load_json(content, 'report'), 'report')


def encode_report(report: Report) -> bytes:
    """Encode a report body; the mirror of decode_report."""
    return json.dumps(report.model_dump(mode='json')).encode('utf-8')


def decode_bytes(content: bytes) -> bytes:
    return content


def decode_json(content: bytes) -> Any:
    return _load_json(content, 'file')


def decode_text(content: bytes) -> str:
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as e:
        raise TransportError(f"File is not valid UTF-8 text: {e}", cause=e) from e
