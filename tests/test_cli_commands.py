"""Tests for CLI command handlers."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from cli.commands import dispatch_command, handle_use_token, run_command
from cli.models import (
    DeleteFileCommand,
    GetContainerCommand,
    GetFileCommand,
    GetTokenCommand,
    ListReportsCommand,
    NewContainerCommand,
    NewTokenCommand,
    PutFileCommand,
    ReportCommand,
    UseTokenCommand,
)
from client.exceptions import InvalidPassword
from client.schemas import EncryptedInfo, FullInfo, Report, ReportInfo, Token
from client.storage_client import StorageClient

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def mock_client():
    return Mock(spec=StorageClient)


def _container() -> FullInfo:
    return FullInfo(id='c1', created=NOW, modified=NOW, encrypted=False, storage_limit=2048, files=[])


def test_handle_use_token(temp_config):
    result = handle_use_token(UseTokenCommand(token='t1'), temp_config)

    assert 'saved' in result
    assert temp_config.get_token() == 't1'


@pytest.mark.asyncio
async def test_get_container_encrypted(mock_client, temp_config):
    mock_client.get_container = AsyncMock(return_value=EncryptedInfo(id='c1'))

    result = await dispatch_command(GetContainerCommand(container_id='c1'), mock_client, temp_config)

    assert 'encrypted' in result
    mock_client.get_container.assert_awaited_once_with('c1', None)


@pytest.mark.asyncio
async def test_new_container_uses_saved_token(mock_client, temp_config):
    temp_config.set_token('saved')
    mock_client.new_container = AsyncMock(return_value=_container())

    result = await dispatch_command(NewContainerCommand(password='pw'), mock_client, temp_config)

    assert 'Created container c1' in result
    mock_client.new_container.assert_awaited_once_with('saved', 'pw')


@pytest.mark.asyncio
async def test_new_container_without_token(mock_client, temp_config):
    mock_client.new_container = AsyncMock()

    result = await dispatch_command(NewContainerCommand(), mock_client, temp_config)

    assert 'use-token' in result
    mock_client.new_container.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_file_prints_text(mock_client, temp_config):
    mock_client.get_file = AsyncMock(return_value=b'hello')

    result = await dispatch_command(GetFileCommand(container_id='c1', path='a.txt'), mock_client, temp_config)

    assert result == 'hello'


@pytest.mark.asyncio
async def test_get_file_saves_output(mock_client, temp_config, tmp_path):
    mock_client.get_file = AsyncMock(return_value=b'\x00\x01')
    output = tmp_path / 'out' / 'a.bin'

    result = await dispatch_command(
        GetFileCommand(container_id='c1', path='a.bin', output_path=str(output)), mock_client, temp_config
    )

    assert 'Saved 2 B' in result
    assert output.read_bytes() == b'\x00\x01'


@pytest.mark.asyncio
async def test_put_file(mock_client, temp_config, sample_file):
    mock_client.put_file = AsyncMock(return_value=None)

    cmd = PutFileCommand(container_id='c1', path='docs/test.txt', local_path=str(sample_file), password='pw')
    result = await dispatch_command(cmd, mock_client, temp_config)

    assert 'Stored docs/test.txt' in result
    mock_client.put_file.assert_awaited_once_with('c1', 'docs/test.txt', b'Sample content for testing', 'pw')


@pytest.mark.asyncio
async def test_put_file_missing_local_file(mock_client, temp_config):
    mock_client.put_file = AsyncMock()

    cmd = PutFileCommand(container_id='c1', path='a.txt', local_path='/nonexistent/file.txt')
    result = await dispatch_command(cmd, mock_client, temp_config)

    assert 'File not found' in result
    mock_client.put_file.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_file(mock_client, temp_config):
    mock_client.delete_file = AsyncMock(return_value=None)

    result = await dispatch_command(DeleteFileCommand(container_id='c1', path='a.txt'), mock_client, temp_config)

    assert result == 'Deleted a.txt'


@pytest.mark.asyncio
async def test_token_commands(mock_client, temp_config):
    token = Token(id='t2', parent='root', storage_limit=10, token_limit=1, created=NOW, hint='team')
    mock_client.get_token = AsyncMock(return_value=token)
    mock_client.new_token = AsyncMock(return_value=token)

    shown = await dispatch_command(GetTokenCommand(token_id='t2'), mock_client, temp_config)
    created = await dispatch_command(
        NewTokenCommand(parent='root', token_limit=1, storage_limit=10, hint='team'), mock_client, temp_config
    )

    assert 'Token t2' in shown
    assert 'Hint:          team' in shown
    assert 'Created token t2' in created
    mock_client.new_token.assert_awaited_once_with('root', 1, 10, 'team')


@pytest.mark.asyncio
async def test_reports_commands(mock_client, temp_config):
    info = ReportInfo(id='r1', container_id='c1', created=NOW, report=Report(reason='spam', files=['a.txt']))
    mock_client.get_reports = AsyncMock(return_value=[info])
    mock_client.post_report = AsyncMock(return_value=info)

    listed = await dispatch_command(ListReportsCommand(container_id='c1'), mock_client, temp_config)
    filed = await dispatch_command(
        ReportCommand(container_id='c1', reason='spam', files=('a.txt',)), mock_client, temp_config
    )

    assert 'Found 1 report(s)' in listed
    assert 'spam' in listed
    assert filed == 'Filed report r1'
    mock_client.get_reports.assert_awaited_once_with('c1', None)
    mock_client.post_report.assert_awaited_once_with('c1', Report(reason='spam', files=['a.txt']), None)


@pytest.mark.asyncio
async def test_no_reports(mock_client, temp_config):
    mock_client.get_reports = AsyncMock(return_value=[])

    assert await dispatch_command(ListReportsCommand(), mock_client, temp_config) == 'No open reports.'


@pytest.mark.asyncio
async def test_storage_errors_become_messages(mock_client, temp_config):
    mock_client.get_container = AsyncMock(side_effect=InvalidPassword('get container: bad', status_code=403))

    result = await dispatch_command(GetContainerCommand(container_id='c1'), mock_client, temp_config)

    assert result.startswith('Error: ')
    assert 'status=403' in result


def test_run_command_use_token_needs_no_client(temp_config):
    assert 'saved' in run_command(UseTokenCommand(token='t9'), config=temp_config)
    assert temp_config.get_token() == 't9'


def test_run_command_reports_connection_failure(temp_config):
    temp_config.data['host'] = 'http://127.0.0.1:9'
    temp_config.data['timeout'] = 2

    result = run_command(GetTokenCommand(token_id='t1'), config=temp_config)

    assert result.startswith('Error: ')


@pytest.mark.asyncio
async def test_get_file_output_is_directory(mock_client, temp_config, tmp_path):
    mock_client.get_file = AsyncMock(return_value=b'hello')

    result = await dispatch_command(
        GetFileCommand(container_id='c1', path='a.txt', output_path=str(tmp_path)), mock_client, temp_config
    )

    assert result.startswith('Error writing file:')


@pytest.mark.asyncio
async def test_put_file_unreadable_local_file(mock_client, temp_config, sample_file, monkeypatch):
    mock_client.put_file = AsyncMock()

    def failing_read(self):
        raise PermissionError(13, 'Permission denied', str(self))

    monkeypatch.setattr(Path, 'read_bytes', failing_read)

    cmd = PutFileCommand(container_id='c1', path='a.txt', local_path=str(sample_file))
    result = await dispatch_command(cmd, mock_client, temp_config)

    assert result.startswith('Error reading file:')
    mock_client.put_file.assert_not_awaited()
