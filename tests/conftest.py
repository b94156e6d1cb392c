"""Shared pytest fixtures for all tests."""

import pytest
import httpx

from cli.config import Config
from client.storage_client import StorageClient
from client.transport import HttpxTransport
from common.constants import HOST_ENV_VAR, TIMEOUT_ENV_VAR

TEST_HOST = 'http://test'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep config defaults independent of the developer's environment."""
    monkeypatch.delenv(HOST_ENV_VAR, raising=False)
    monkeypatch.delenv(TIMEOUT_ENV_VAR, raising=False)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .strongbox directory
    """
    config_dir = tmp_path / '.strongbox'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a sample file for testing file uploads.

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_text('Sample content for testing')
    return file_path


@pytest.fixture
def full_container_json():
    return {
        'id': 'c1',
        'created': '2024-01-01T00:00:00Z',
        'modified': '2024-01-02T12:30:00Z',
        'encrypted': True,
        'storage_limit': 1000000,
        'files': [
            {
                'id': 'f1',
                'path': 'docs/readme.txt',
                'created': '2024-01-01T00:00:00Z',
                'modified': '2024-01-01T00:00:00Z',
                'size': 10,
                'mime': 'text/plain',
            },
            {
                'id': 'f2',
                'path': 'docs/img/logo.png',
                'created': '2024-01-01T00:00:00Z',
                'modified': '2024-01-01T00:00:00Z',
                'size': 4096,
                'mime': 'image/png',
            },
        ],
    }


@pytest.fixture
def token_json():
    return {
        'id': 't1',
        'parent': 'root',
        'child_tokens': [],
        'child_containers': [],
        'storage_limit': 1000000,
        'token_limit': 1,
        'expired': False,
        'created': '2024-01-01T00:00:00Z',
        'used': None,
        'hint': 't1',
    }


@pytest.fixture
def report_info_json():
    return {
        'id': 'r1',
        'container_id': 'c1',
        'created': '2024-01-03T08:00:00Z',
        'report': {'reason': 'spam', 'files': ['docs/readme.txt']},
    }


@pytest.fixture
def make_client():
    """
    Build a StorageClient whose requests go to a handler function.

    Usage: client = make_client(lambda request: httpx.Response(200, json={...}))
    """
    def _make(handler) -> StorageClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return StorageClient(TEST_HOST, transport=HttpxTransport(client=http))

    return _make
