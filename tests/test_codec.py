"""Tests for decoding and encoding service payloads."""

import json

import pytest

from client.codec import (
    decode_container,
    decode_full_container,
    decode_json,
    decode_report,
    decode_report_infos,
    decode_text,
    decode_token,
    encode_report,
)
from client.exceptions import TransportError
from client.schemas import EncryptedInfo, FullInfo, Report


def _body(data) -> bytes:
    return json.dumps(data).encode('utf-8')


def test_decode_full_container(full_container_json):
    container = decode_container(_body(full_container_json))

    assert isinstance(container, FullInfo)
    assert container.id == 'c1'
    assert container.encrypted is True
    assert container.storage_limit == 1000000
    assert [f.path for f in container.files] == ['docs/readme.txt', 'docs/img/logo.png']
    assert container.created.year == 2024


def test_decode_id_only_container_is_encrypted_info():
    container = decode_container(_body({'id': 'c1'}))

    assert isinstance(container, EncryptedInfo)
    assert container.id == 'c1'


def test_partial_full_shape_falls_back_to_encrypted_info():
    container = decode_container(_body({'id': 'c1', 'encrypted': True}))

    assert isinstance(container, EncryptedInfo)


def test_decode_container_rejects_unknown_shape():
    with pytest.raises(TransportError):
        decode_container(_body({'name': 'nope'}))


def test_decode_container_rejects_malformed_json():
    with pytest.raises(TransportError):
        decode_container(b'{not json')


def test_decode_full_container_does_not_fall_back():
    with pytest.raises(TransportError):
        decode_full_container(_body({'id': 'c1'}))


def test_decode_token_with_null_optionals(token_json):
    token_json.update({'parent': None, 'storage_limit': None, 'token_limit': None, 'hint': None})
    token = decode_token(_body(token_json))

    assert token.parent is None
    assert token.storage_limit is None
    assert token.token_limit is None
    assert token.hint is None
    assert token.is_root


def test_decode_token_sets(token_json):
    token_json['child_tokens'] = ['a', 'b', 'a']
    token = decode_token(_body(token_json))

    assert token.child_tokens == frozenset({'a', 'b'})
    assert token.child_containers == frozenset()


def test_report_round_trip():
    report = Report(reason='illegal content', files=['a.txt', 'dir/b.txt'])

    decoded = decode_report(encode_report(report))

    assert decoded.reason == report.reason
    assert decoded.files == report.files


def test_report_encoding_field_names():
    data = json.loads(encode_report(Report(reason='spam', files=['x'])))
    assert data == {'reason': 'spam', 'files': ['x']}


def test_report_files_default_to_empty():
    assert decode_report(_body({'reason': 'spam'})).files == ()


def test_decode_report_infos(report_info_json):
    reports = decode_report_infos(_body([report_info_json]))

    assert len(reports) == 1
    assert reports[0].container_id == 'c1'
    assert reports[0].report.reason == 'spam'


def test_file_body_decoders():
    assert decode_json(b'{"a": 1}') == {'a': 1}
    assert decode_text('hé'.encode('utf-8')) == 'hé'

    with pytest.raises(TransportError):
        decode_json(b'not json')
    with pytest.raises(TransportError):
        decode_text(b'\xff\xfe')
