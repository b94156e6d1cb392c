"""Tests for query string and URL assembly."""

from client.query import build_query, build_url, normalize_host, truncate_password


def test_build_query_keeps_order_and_drops_missing():
    query = build_query([('token', 'T'), ('password', None), ('hint', 'h')])
    assert query == 'token=T&hint=h'


def test_build_query_does_not_sort_or_deduplicate():
    query = build_query([('b', '2'), ('a', '1'), ('b', '3')])
    assert query == 'b=2&a=1&b=3'


def test_build_query_percent_encodes_values():
    query = build_query([('path', 'docs/my file.txt'), ('hint', 'a&b=c')])
    assert query == 'path=docs%2Fmy%20file.txt&hint=a%26b%3Dc'


def test_build_query_integers():
    assert build_query([('token_limit', 1), ('storage_limit', 1000000)]) == 'token_limit=1&storage_limit=1000000'


def test_build_query_empty():
    assert build_query([]) == ''
    assert build_query([('password', None)]) == ''


def test_truncate_password_keeps_short_passwords():
    assert truncate_password('secret') == b'secret'
    assert truncate_password(None) is None


def test_truncate_password_cuts_at_1024_bytes():
    assert truncate_password('a' * 2000) == b'a' * 1024


def test_truncate_password_counts_bytes_not_characters():
    truncated = truncate_password('é' * 600)
    assert len(truncated) == 1024
    assert truncated == ('é' * 512).encode('utf-8')


def test_truncated_bytes_are_percent_encoded():
    query = build_query([('password', truncate_password('é' * 600))])
    assert query == 'password=' + '%C3%A9' * 512


def test_normalize_host():
    assert normalize_host('box.example.com') == 'https://box.example.com'
    assert normalize_host('http://localhost:8000/') == 'http://localhost:8000'


def test_build_url_segments_and_query():
    url = build_url('http://h', 'file', 'c1', params=[('path', 'a/b.txt'), ('password', None)])
    assert url == 'http://h/v1/file/c1?path=a%2Fb.txt'


def test_build_url_trailing_slash_without_query():
    assert build_url('http://h', 'report', trailing_slash=True) == 'http://h/v1/report/'


def test_build_url_encodes_ids():
    assert build_url('http://h', 'token', 'a/b', 'new') == 'http://h/v1/token/a%2Fb/new'
