from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_table():
    return MagicMock()


@pytest.fixture
def mock_boto3(mock_table):
    """boto3 モジュールの代わりに使うモック（Table は mock_table を返す）"""
    boto3 = MagicMock()
    boto3.resource.return_value.Table.return_value = mock_table
    return boto3
